"""BSDIFF40 patch payload with a validated header."""

from dataclasses import dataclass

MAGIC = b"BSDIFF40"
HEADER_SIZE = 32


def _decode_offt(buf: bytes) -> int:
    """Decode bsdiff's sign-magnitude little-endian 64-bit integer."""
    value = int.from_bytes(buf[:7] + bytes([buf[7] & 0x7F]), "little")
    return -value if buf[7] & 0x80 else value


@dataclass(frozen=True)
class PatchPayload:
    """Opaque BSDIFF40 delta plus the lengths declared by its header.

    Layout: 8-byte magic, compressed control block length, compressed diff
    block length, output length (each a 64-bit offt), then the bzip2 control,
    diff and extra blocks.
    """

    raw: bytes
    control_length: int
    diff_length: int
    output_length: int

    @property
    def algorithm(self) -> str:
        return MAGIC.decode("ascii")

    @property
    def extra_length(self) -> int:
        return len(self.raw) - HEADER_SIZE - self.control_length - self.diff_length

    @classmethod
    def parse(cls, raw: bytes) -> "PatchPayload":
        """Validate the header and return the payload.

        Raises:
            ValueError: If the header is missing, has the wrong magic or declares impossible lengths
        """
        raw = bytes(raw)
        if len(raw) < HEADER_SIZE:
            raise ValueError(f"payload too short for a BSDIFF40 header ({len(raw)} bytes < {HEADER_SIZE} bytes)")
        if raw[:8] != MAGIC:
            raise ValueError(f"payload magic must be {MAGIC!r} (found: {raw[:8]!r})")

        control_length = _decode_offt(raw[8:16])
        diff_length = _decode_offt(raw[16:24])
        output_length = _decode_offt(raw[24:32])

        errors: list[str] = []
        if control_length < 0:
            errors.append(f"control block length is negative ({control_length})")
        if diff_length < 0:
            errors.append(f"diff block length is negative ({diff_length})")
        if output_length < 0:
            errors.append(f"output length is negative ({output_length})")
        if not errors and HEADER_SIZE + control_length + diff_length > len(raw):
            errors.append(
                f"declared blocks exceed payload size "
                f"({HEADER_SIZE} + {control_length} + {diff_length} > {len(raw)} bytes)"
            )
        if errors:
            raise ValueError("; ".join(errors))

        return cls(raw=raw, control_length=control_length, diff_length=diff_length, output_length=output_length)

    def describe(self) -> dict[str, int | str]:
        return {
            "algorithm": self.algorithm,
            "size_bytes": len(self.raw),
            "control_length": self.control_length,
            "diff_length": self.diff_length,
            "extra_length": self.extra_length,
            "output_length": self.output_length,
        }
