"""Write-once store for verified original binaries."""

from pathlib import Path

from ..checksum.BinaryImage import BinaryImage


class BackupStore:
    """Keeps the operator's backup of the original binary on local disk."""

    def __init__(self, directory: Path):
        self.directory = Path(directory).expanduser()

    def save(self, image: BinaryImage, name: str) -> Path:
        """Persist ``image`` and return its path.

        Existing files are never overwritten: an identical file is reused,
        otherwise the first free ``NAME.N`` path is taken.

        Raises:
            OSError: If the backup cannot be written
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        candidate = self.directory / name
        index = 0
        while candidate.exists():
            if candidate.is_file() and candidate.stat().st_size == len(image) and candidate.read_bytes() == image.data:
                return candidate
            index += 1
            candidate = self.directory / f"{name}.{index}"

        with candidate.open("xb") as fh:
            fh.write(image.data)
        return candidate
