from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    WORD_PROG_ID: str = "Word.Application"
    WORD_VISIBLE: bool = False

    # Empty means the packaged table under core/entries/builtin
    ENTRIES_FILE: str = ""

    PAUSE_ON_EXIT: bool = True

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/math_autocorrect.log"

    @property
    def entries_path(self) -> Path | None:
        if not self.ENTRIES_FILE:
            return None
        return Path(self.ENTRIES_FILE).expanduser()

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MATHAC_"}


settings = Settings()
