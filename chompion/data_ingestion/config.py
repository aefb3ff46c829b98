from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for importing entry exports.
    """

    export_dir: Path = Path("chompion/data/exports")
    entries_filename: str = "entries.csv"
    item_separator: str = ";"
    value_separator: str = ":"

    @property
    def entries_path(self) -> Path:
        return self.export_dir / self.entries_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
