"""
Instant Upload Configuration Handler

Manages the YAML configuration file for instant uploads.
Provides defaults and validation, and hands out the immutable
UploadPolicyConfig used by every policy decision.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from accounts.constants import AccountStrategy
from config.settings import (
    DEFAULT_ACCOUNT_STRATEGY,
    DEFAULT_LOCAL_BEHAVIOUR,
    DEFAULT_PICTURE_UPLOAD_PATH,
    DEFAULT_VIDEO_UPLOAD_PATH,
    INSTANT_UPLOAD_CONFIG_PATH,
    LOCAL_MOVE_DIR,
    PENDING_DB_PATH,
)
from core.constants import LocalBehaviour

BOOLEAN_KEYS = (
    "picture_upload_enabled",
    "video_upload_enabled",
    "picture_wifi_only",
    "video_wifi_only",
)


class ConfigError(ValueError):
    """Invalid instant upload configuration"""


@dataclass(frozen=True)
class UploadPolicyConfig:
    """
    Upload toggles and behaviour, passed into every policy decision.

    All toggles default to off, like a fresh install.
    """

    picture_upload_enabled: bool = False
    video_upload_enabled: bool = False
    picture_wifi_only: bool = False
    video_wifi_only: bool = False
    local_behaviour_on_success: LocalBehaviour = LocalBehaviour.FORGET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadPolicyConfig":
        """Build from a configuration mapping (unknown keys ignored)"""
        return cls(
            picture_upload_enabled=bool(data.get("picture_upload_enabled", False)),
            video_upload_enabled=bool(data.get("video_upload_enabled", False)),
            picture_wifi_only=bool(data.get("picture_wifi_only", False)),
            video_wifi_only=bool(data.get("video_wifi_only", False)),
            local_behaviour_on_success=LocalBehaviour.from_setting(
                data.get("local_behaviour", DEFAULT_LOCAL_BEHAVIOUR),
            ),
        )


class InstantUploadConfig:
    """
    Instant upload configuration with YAML file support.

    Reads from config/instant_upload.yaml if it exists,
    otherwise uses defaults from config/settings.py.

    Usage:
        config = InstantUploadConfig()
        policy = config.policy
        strategy = config.account_strategy
    """

    def __init__(self, config_path: Optional[Path] = None, create_if_missing: bool = True):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            create_if_missing: Write a default file when none exists

        Raises:
            ConfigError: If the configuration has invalid values
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or INSTANT_UPLOAD_CONFIG_PATH)
        self.create_if_missing = create_if_missing

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

        self.logger.info(f"Instant upload config loaded from {self.config_path}")

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Upload toggles
            'picture_upload_enabled': False,
            'video_upload_enabled': False,
            'picture_wifi_only': False,
            'video_wifi_only': False,
            'local_behaviour': DEFAULT_LOCAL_BEHAVIOUR,

            # Remote folders
            'picture_upload_path': DEFAULT_PICTURE_UPLOAD_PATH,
            'video_upload_path': DEFAULT_VIDEO_UPLOAD_PATH,

            # Accounts
            'account_strategy': DEFAULT_ACCOUNT_STRATEGY,
            'allowed_accounts': [],
            'accounts': [],
            'current_account': None,

            # Local paths
            'pending_db_path': str(PENDING_DB_PATH),
            'local_move_dir': str(LOCAL_MOVE_DIR),
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}

                if not isinstance(file_config, dict):
                    raise ConfigError(
                        f"{self.config_path} must contain a mapping, "
                        f"got {type(file_config).__name__}"
                    )

                # File overrides defaults
                config.update(file_config)

                self.logger.info(f"Loaded config from {self.config_path}")

            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults."
                )
        elif self.create_if_missing:
            self.logger.info(
                f"Config file not found at {self.config_path}. "
                f"Using defaults. Creating default config file..."
            )
            self._save_config(config)
        else:
            self.logger.info(
                f"Config file not found at {self.config_path}. Using defaults."
            )

        self._validate_config(config)

        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        for key in BOOLEAN_KEYS:
            if not isinstance(config[key], bool):
                raise ConfigError(f"{key} must be true or false, got {config[key]!r}")

        try:
            strategy = AccountStrategy.from_setting(config['account_strategy'])
        except ValueError as e:
            raise ConfigError(str(e)) from e

        for key in ('allowed_accounts', 'accounts'):
            if not isinstance(config[key], list):
                raise ConfigError(f"{key} must be a list of account names")

        behaviour = str(config['local_behaviour']).strip().upper()
        if behaviour not in ("NOTHING", "FORGET", "MOVE"):
            self.logger.warning(
                f"Unknown local_behaviour {config['local_behaviour']!r}, "
                f"files will be left in place"
            )

        if strategy == AccountStrategy.ALLOW_LIST and not config['allowed_accounts']:
            self.logger.warning(
                "account_strategy is allow_list but allowed_accounts is empty. "
                "No account will receive uploads."
            )

    def _save_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Save configuration to YAML file"""
        if config is None:
            config = self._config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                yaml.dump(
                    config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            self.logger.info(f"Config saved to {self.config_path}")

        except OSError as e:
            self.logger.error(f"Failed to save config: {e}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def policy(self) -> UploadPolicyConfig:
        """Immutable upload policy for decision calls"""
        return UploadPolicyConfig.from_dict(self._config)

    @property
    def account_strategy(self) -> AccountStrategy:
        """Which accounts receive uploads"""
        return AccountStrategy.from_setting(self._config['account_strategy'])

    @property
    def allowed_accounts(self) -> List[str]:
        """Account names for the allow-list strategy"""
        return [str(name) for name in self._config['allowed_accounts']]

    @property
    def accounts(self) -> List[str]:
        """Registered account names"""
        return [str(name) for name in self._config['accounts']]

    @property
    def current_account(self) -> Optional[str]:
        """Active account name (None = first registered account)"""
        return self._config['current_account']

    @property
    def picture_upload_path(self) -> str:
        """Remote folder for pictures"""
        return self._config['picture_upload_path']

    @property
    def video_upload_path(self) -> str:
        """Remote folder for videos"""
        return self._config['video_upload_path']

    @property
    def pending_db_path(self) -> Path:
        """SQLite file of the pending upload store"""
        return Path(self._config['pending_db_path'])

    @property
    def local_move_dir(self) -> Path:
        """Local folder for files uploaded with MOVE behaviour"""
        return Path(self._config['local_move_dir'])

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately

        Raises:
            ConfigError: If the new value is invalid
        """
        updated = dict(self._config)
        updated[key] = value
        self._validate_config(updated)
        self._config = updated

        if save:
            self._save_config()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return self._config.copy()

    def __repr__(self) -> str:
        """Human-readable representation"""
        return f"InstantUploadConfig(path={self.config_path})"
