from dataclasses import dataclass, field
import os

from .models import SplitStrategy, SplitterConfig
from .splitters import DEFAULT_SEPARATOR


@dataclass
class SplitterServiceConfig:
    data_dir: str = "data/text_splitter"
    strategy: SplitStrategy = SplitStrategy.TOKEN
    separator: str = DEFAULT_SEPARATOR
    splitter: SplitterConfig = field(default_factory=SplitterConfig)

    @classmethod
    def from_env(cls) -> "SplitterServiceConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _bool(name: str, default: bool) -> bool:
            value = os.environ.get(name)
            if not value:
                return default
            return value.strip().lower() in {"1", "true", "yes", "on"}

        defaults = SplitterConfig()
        splitter = SplitterConfig(
            chunk_size=_int("SPLITTER_CHUNK_SIZE", defaults.chunk_size),
            overlap=_int("SPLITTER_OVERLAP", defaults.overlap),
            chunk=_bool("SPLITTER_CHUNK", defaults.chunk),
            encoding_name=os.environ.get("SPLITTER_ENCODING", defaults.encoding_name),
        )
        # Escaped newlines are common in .env files
        separator = os.environ.get("SPLITTER_SEPARATOR", cls.separator)
        separator = separator.replace("\\n", "\n").replace("\\t", "\t")

        return cls(
            data_dir=os.environ.get("SPLITTER_DATA_DIR", cls.data_dir),
            strategy=SplitStrategy(os.environ.get("SPLITTER_STRATEGY", cls.strategy.value)),
            separator=separator,
            splitter=splitter,
        )
