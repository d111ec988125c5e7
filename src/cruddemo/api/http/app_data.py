from dataclasses import dataclass

from src.cruddemo.core.security import AccessPolicy, CredentialStore, InMemoryCredentialStore
from src.cruddemo.core.services import DbSessionService
from src.cruddemo.entities.service.student import StudentRoster
from src.cruddemo.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
    access_policy: AccessPolicy
    credential_store: CredentialStore
    student_roster: StudentRoster

    @classmethod
    def from_config(cls, config: ConfigData) -> "ApplicationDependencies":
        """Build every application-wide collaborator from one configuration."""
        return cls(
            config=config,
            database_service=DbSessionService(config),
            access_policy=AccessPolicy.from_config(
                config.security, config.app.api_prefix
            ),
            credential_store=InMemoryCredentialStore.from_config(config.security),
            student_roster=StudentRoster(),
        )
