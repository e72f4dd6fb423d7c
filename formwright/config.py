from pathlib import Path
from typing import Any, List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import dotenv

dotenv.load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):

    # rendering stages, in order; the wrapper always runs last
    COMPONENTS: List[str] = ["errors", "hint", "label_input"]

    REQUIRED_BY_DEFAULT: bool = True
    HTML5: bool = True
    BROWSER_VALIDATIONS: bool = True

    WRAPPER_TAG: Optional[str] = "div"
    WRAPPER_CLASS: List[str] = ["input"]
    WRAPPER_ERROR_CLASS: str = "field_with_errors"

    COLLECTION_WRAPPER_TAG: Optional[str] = None
    COLLECTION_WRAPPER_CLASS: Optional[str] = None
    ITEM_WRAPPER_TAG: Optional[str] = "span"
    ITEM_WRAPPER_CLASS: Optional[str] = None
    INCLUDE_DEFAULT_INPUT_WRAPPER_CLASS: bool = True

    BOOLEAN_STYLE: Literal["inline", "nested"] = "inline"

    HINT_TAG: str = "span"
    HINT_CLASS: str = "hint"
    ERROR_TAG: str = "span"
    ERROR_CLASS: str = "error"

    I18N_SCOPE: str = "simple_form"
    DEFAULT_LOCALE: str = "en"

    LOG_STD_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None
    LOG_FILE_LEVEL: str = "DEBUG"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB per file
    LOG_BACKUP_COUNT: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FORM_",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True
    )

    @field_validator("COMPONENTS", "WRAPPER_CLASS", mode="before")
    def string_to_list(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(',') if s.strip()]
        return v

    @field_validator(
        "WRAPPER_TAG", "COLLECTION_WRAPPER_TAG", "ITEM_WRAPPER_TAG",
        mode="before")
    def falsy_tag(cls, v):
        # "false", "" or "none" in the environment switch a wrapper off
        if isinstance(v, str) and v.strip().lower() in ("", "false", "none"):
            return None
        if v is False:
            return None
        return v

    @field_validator("LOG_STD_LEVEL", "LOG_FILE_LEVEL", mode="before")
    def check_level(cls, v):
        if isinstance(v, str) and v.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return v

    @field_validator("LOG_FILE", mode="before")
    def make_parent(cls, v):
        if v:
            Path(v).parent.mkdir(parents=True, exist_ok=True)
        return v

    def swap(self, **kwargs: Any) -> "Settings":
        """Return a validated copy with the given settings replaced."""
        data = self.model_dump()
        data.update(kwargs)
        return self.__class__(**data)
