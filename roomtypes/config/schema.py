"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegistryConfig(Base):
    """Room type registry configuration."""
    section_start: str = "c"  # Reference kind opening the standard section
    section_end: str = "d"  # Reference kind closing the standard section
    register_builtin: bool = True  # Register c/p/d/l on bootstrap
    seal_on_bootstrap: bool = True  # Reject registrations after bootstrap


class PolicyConfig(Base):
    """Access policy configuration."""
    read_only_permission: str = "post-readonly"  # Lets a user post in read-only rooms


class LoggingConfig(Base):
    """Logging configuration."""
    level: str = "SUCCESS"  # Console level
    file: str = "~/.roomtypes/roomtypes.log"  # Persistent log, always at DEBUG
    verbose: bool = False  # Console at DEBUG

    @property
    def log_path(self) -> Path:
        """Get expanded log file path."""
        return Path(self.file).expanduser()

    @property
    def console_level(self) -> str:
        return "DEBUG" if self.verbose else self.level


class StorageConfig(Base):
    """Room storage configuration."""
    rooms_dir: str = "~/.roomtypes/rooms"

    @property
    def rooms_path(self) -> Path:
        """Get expanded rooms directory."""
        return Path(self.rooms_dir).expanduser()


class Config(BaseSettings):
    """Root configuration for roomtypes."""
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    model_config = ConfigDict(
        env_prefix="ROOMTYPES_",
        env_nested_delimiter="__"
    )
