import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from signup.countries import CountryCityTable
from signup.log import level_number

load_dotenv()


class FormConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success_route: str = "/success"
    log_level: str = "INFO"
    country_table_path: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level_number(value)
        return value.upper()

    @classmethod
    def from_env(cls) -> "FormConfig":
        return cls(
            success_route=os.environ.get("SIGNUP_SUCCESS_ROUTE", "/success"),
            log_level=os.environ.get("SIGNUP_LOG_LEVEL", "INFO"),
            country_table_path=os.environ.get("SIGNUP_COUNTRY_TABLE") or None,
        )

    def country_table(self) -> CountryCityTable:
        if self.country_table_path is None:
            return CountryCityTable()
        return CountryCityTable.from_json_file(self.country_table_path)
