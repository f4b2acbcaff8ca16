# src/config/settings.py
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.journal.settings import JournalSettings
from src.playbook.settings import PlaybookSettings
from src.scoring.settings import WolfScoreSettings


class SystemConfig(BaseModel):
    name: str = "Trading Journal Analytics"
    version: str = "1.0.0"


class AccountConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JOURNAL_")

    initial_balance: float | None = Field(default=None, gt=0)


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    journal: JournalSettings = Field(default_factory=JournalSettings)
    scoring: WolfScoreSettings = Field(default_factory=WolfScoreSettings)
    playbook: PlaybookSettings = Field(default_factory=PlaybookSettings)
    account: AccountConfig = Field(default_factory=AccountConfig)

    @property
    def initial_balance(self) -> float:
        """Account balance from the environment, else the journal default."""
        if self.account.initial_balance is not None:
            return self.account.initial_balance
        return self.journal.default_initial_balance

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        data.pop("account", None)
        account = AccountConfig()

        return cls(
            **data,
            account=account,
        )
