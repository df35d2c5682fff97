"""
Configuration file for the Tic-Tac-Toe game hub.
All settings are centralized here for easy modification.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GameConfig:
    """Game-specific settings"""
    dictionary_path: str = "dic.txt"
    obstacles_per_move: int = 2


@dataclass
class LoggingConfig:
    """Logging settings"""
    log_level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR
    log_to_file: bool = False
    log_file: str = "hub.log"
    log_dir: str = "logs"

    # Print a results summary when the hub exits
    verbose: bool = True


@dataclass
class Config:
    """Master configuration combining all settings"""
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # None means a fresh seed on every run
    seed: Optional[int] = None

    def save(self, path: str):
        """Save configuration to file"""
        import json
        import dataclasses

        with open(path, 'w') as f:
            json.dump(dataclasses.asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: str):
        """Load configuration from file"""
        import json

        with open(path, 'r') as f:
            data = json.load(f)

        # Recursively create dataclass instances
        def dict_to_dataclass(data, cls):
            if not isinstance(data, dict):
                return data

            kwargs = {}
            for field_name, field_value in data.items():
                if field_name in cls.__dataclass_fields__:
                    field_type = cls.__dataclass_fields__[field_name].type
                    if hasattr(field_type, '__dataclass_fields__'):
                        kwargs[field_name] = dict_to_dataclass(
                            field_value, field_type)
                    else:
                        kwargs[field_name] = field_value
            return cls(**kwargs)

        return dict_to_dataclass(data, cls)


def get_debug_config():
    """Debug configuration with verbose logging to file and a fixed seed"""
    config = Config()
    config.logging.log_level = "DEBUG"
    config.logging.log_to_file = True
    config.seed = 42
    return config
