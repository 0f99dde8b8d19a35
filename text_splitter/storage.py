from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import SplitResult, SplitStrategy


@dataclass
class SplitPaths:
    document_id: str
    strategy: SplitStrategy
    split_dir: Path
    split_file: Path


class SplitStorage:
    """
    Stores split results per document and strategy:
    ``<data_dir>/<document_id>/splits/<strategy>/<document_id>_<timestamp>.json``
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def build_paths(self, document_id: str, strategy: SplitStrategy) -> SplitPaths:
        strategy = SplitStrategy(strategy)
        # Microseconds keep repeated splits of one file apart
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        split_dir = self.data_dir / document_id / "splits" / strategy.value
        split_dir.mkdir(parents=True, exist_ok=True)
        return SplitPaths(
            document_id=document_id,
            strategy=strategy,
            split_dir=split_dir,
            split_file=split_dir / f"{document_id}_{timestamp}.json",
        )

    def save(self, result: SplitResult) -> SplitPaths:
        paths = self.build_paths(result.document_id, result.strategy)
        result.save(str(paths.split_file))
        return paths

    def latest(self, document_id: str, strategy: SplitStrategy) -> Optional[SplitResult]:
        """Load the most recent saved result, or None if there is none."""
        split_dir = self.data_dir / document_id / "splits" / SplitStrategy(strategy).value
        files = sorted(split_dir.glob(f"{document_id}_*.json"))
        if not files:
            return None
        return SplitResult.load(str(files[-1]))
