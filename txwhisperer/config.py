from pathlib import Path

from pydantic_settings import BaseSettings

_DEFAULT_TABLE = Path(__file__).parent / "data" / "flagged_entries.json"


class Settings(BaseSettings):
    flagged_table_path: str = ""
    max_input_length: int = 200
    history_max_items: int = 50
    history_path: str = ""

    @property
    def flagged_table_file(self) -> Path:
        if self.flagged_table_path:
            return Path(self.flagged_table_path)
        return _DEFAULT_TABLE

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
