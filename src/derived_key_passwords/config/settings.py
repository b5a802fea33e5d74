"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Pbkdf2Iterations = Annotated[int, Field(gt=0, le=10_000_000)]
SaltBytes = Annotated[int, Field(ge=8, le=64)]
KeyLength = Annotated[int, Field(gt=0, le=128)]
BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven password storage settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_scheme: Literal["pbkdf2", "bcrypt"] = Field(
        default="pbkdf2",
        validation_alias="PASSWORD_SCHEME",
    )
    pbkdf2_iterations: Pbkdf2Iterations = Field(
        default=600_000,
        validation_alias="PBKDF2_ITERATIONS",
    )
    pbkdf2_digest: Literal["sha256", "sha512"] = Field(
        default="sha256",
        validation_alias="PBKDF2_DIGEST",
    )
    pbkdf2_salt_bytes: SaltBytes = Field(default=16, validation_alias="PBKDF2_SALT_BYTES")
    pbkdf2_key_length: KeyLength = Field(default=32, validation_alias="PBKDF2_KEY_LENGTH")
    bcrypt_rounds: BcryptRounds = Field(default=12, validation_alias="BCRYPT_ROUNDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
