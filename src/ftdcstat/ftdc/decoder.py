# topmark:header:start
#
#   project      : FtdcStat
#   file         : decoder.py
#   file_relpath : src/ftdcstat/ftdc/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode FTDC diagnostic files into `RawChunk`s.

An FTDC file is a plain sequence of BSON documents. Documents with
``type == 1`` hold a compressed metrics chunk in their ``data`` field:

1. a little-endian ``uint32`` with the uncompressed size, followed by
2. a zlib stream which decompresses to
   - a BSON *reference* document (the first sample),
   - ``uint32`` metric count and ``uint32`` delta count,
   - unsigned LEB128 varint deltas, metric-major, where a ``0`` delta is
     followed by a varint with the number of *additional* zero deltas.
     Zero runs may continue into the next metric.

Metric names are the ``/``-joined paths of the numeric leaves of the
reference document, in document order. Documents of other types (metadata)
are skipped.
"""

from __future__ import annotations

import math
import zlib
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

import bson
from bson.codec_options import CodecOptions, DatetimeConversion
from bson.datetime_ms import DatetimeMS
from bson.errors import BSONError
from bson.timestamp import Timestamp

from ftdcstat.config.logging import get_logger
from ftdcstat.ftdc.chunk import RawChunk

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

UINT64_MASK: Final[int] = (1 << 64) - 1

KEY_SEPARATOR: Final[str] = "/"
TIMESTAMP_INCREMENT_SUFFIX: Final[str] = "inc"

FTDC_TYPE_METADATA: Final[int] = 0
FTDC_TYPE_METRIC_CHUNK: Final[int] = 1
FTDC_TYPE_PERIODIC_METADATA: Final[int] = 2

FTDC_FILE_GLOB: Final[str] = "metrics.*"

_UINT32_SIZE: Final[int] = 4

# Keep dates as raw milliseconds instead of datetime objects.
_CODEC_OPTIONS: Final[CodecOptions[Any]] = CodecOptions(
    datetime_conversion=DatetimeConversion.DATETIME_MS,
)


class FtdcDecodeError(ValueError):
    """Raised when FTDC content is malformed."""


class _VarintReader:
    """Sequential reader of unsigned LEB128 varints."""

    def __init__(self, buf: bytes, pos: int) -> None:
        self.buf = buf
        self.pos = pos

    def read(self) -> int:
        result = 0
        shift = 0
        while True:
            if self.pos >= len(self.buf):
                raise FtdcDecodeError("Truncated varint stream in metrics chunk")
            byte = self.buf[self.pos]
            self.pos += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result & UINT64_MASK
            shift += 7
            if shift >= 70:
                raise FtdcDecodeError("Varint longer than 10 bytes in metrics chunk")


def flatten_reference(doc: Mapping[str, Any], prefix: str = "") -> dict[str, int]:
    """Extract the numeric leaves of a reference document.

    Nested documents and arrays recurse with ``/``-joined keys (array items
    are keyed by index). Doubles are truncated; int32, int64, bools and dates
    yield one metric each; timestamps yield ``key`` (seconds) and ``key/inc``.
    Other BSON types carry no metric.

    Args:
        doc (Mapping[str, Any]): Decoded reference document.
        prefix (str): Key prefix of ``doc`` inside the root document.

    Returns:
        dict[str, int]: Metric name to unsigned 64-bit value, in document order.
    """
    out: dict[str, int] = {}
    _flatten_into(out, doc, prefix)
    return out


def _flatten_into(out: dict[str, int], doc: Mapping[str, Any], prefix: str) -> None:
    for name, value in doc.items():
        key = f"{prefix}{KEY_SEPARATOR}{name}" if prefix else str(name)
        if isinstance(value, Mapping):
            _flatten_into(out, value, key)
        elif isinstance(value, list):
            _flatten_into(out, {str(i): item for i, item in enumerate(value)}, key)
        elif isinstance(value, bool):
            out[key] = int(value)
        elif isinstance(value, int):
            out[key] = value & UINT64_MASK
        elif isinstance(value, float):
            out[key] = int(value) & UINT64_MASK if math.isfinite(value) else 0
        elif isinstance(value, DatetimeMS):
            out[key] = int(value) & UINT64_MASK
        elif isinstance(value, Timestamp):
            out[key] = value.time
            out[f"{key}{KEY_SEPARATOR}{TIMESTAMP_INCREMENT_SUFFIX}"] = value.inc


def _read_uint32(buf: bytes, pos: int) -> int:
    if pos + _UINT32_SIZE > len(buf):
        raise FtdcDecodeError("Unexpected end of metrics chunk")
    return int.from_bytes(buf[pos : pos + _UINT32_SIZE], "little")


def decode_metrics_chunk(blob: bytes) -> RawChunk:
    """Decode the ``data`` payload of one metrics chunk document.

    Args:
        blob (bytes): Size-prefixed zlib payload.

    Returns:
        RawChunk: One series per metric, each ``delta count + 1`` samples long.

    Raises:
        FtdcDecodeError: If the payload is malformed.
    """
    expected_size: int = _read_uint32(blob, 0)
    try:
        raw: bytes = zlib.decompress(blob[_UINT32_SIZE:])
    except zlib.error as exc:
        raise FtdcDecodeError(f"Cannot decompress metrics chunk: {exc}") from exc
    if len(raw) != expected_size:
        raise FtdcDecodeError(
            f"Metrics chunk size mismatch: expected {expected_size} bytes, got {len(raw)}"
        )

    doc_size: int = _read_uint32(raw, 0)
    try:
        reference: dict[str, Any] = bson.decode(raw[:doc_size], codec_options=_CODEC_OPTIONS)
    except BSONError as exc:
        raise FtdcDecodeError(f"Invalid reference document: {exc}") from exc

    metric_count: int = _read_uint32(raw, doc_size)
    delta_count: int = _read_uint32(raw, doc_size + _UINT32_SIZE)
    starts: dict[str, int] = flatten_reference(reference)
    if len(starts) != metric_count:
        raise FtdcDecodeError(
            f"Metric count mismatch: header says {metric_count}, "
            f"reference document has {len(starts)}"
        )

    reader = _VarintReader(raw, doc_size + 2 * _UINT32_SIZE)
    series: dict[str, list[int]] = {}
    zeroes = 0
    for key, start in starts.items():
        values: list[int] = [start]
        current: int = start
        for _ in range(delta_count):
            if zeroes:
                delta = 0
                zeroes -= 1
            else:
                delta = reader.read()
                if delta == 0:
                    zeroes = reader.read()
            current = (current + delta) & UINT64_MASK
            values.append(current)
        series[key] = values

    logger.trace("Decoded chunk: %d metrics x %d samples", metric_count, delta_count + 1)
    return RawChunk(series=series)


def decode(data: bytes) -> list[RawChunk]:
    """Decode the content of one FTDC file.

    Args:
        data (bytes): Raw file content.

    Returns:
        list[RawChunk]: Metrics chunks in file order.

    Raises:
        FtdcDecodeError: If the content is not a valid FTDC stream.
    """
    try:
        documents: list[dict[str, Any]] = bson.decode_all(data, _CODEC_OPTIONS)
    except BSONError as exc:
        raise FtdcDecodeError(f"Invalid BSON stream: {exc}") from exc

    chunks: list[RawChunk] = []
    for doc in documents:
        doc_type = doc.get("type")
        if doc_type != FTDC_TYPE_METRIC_CHUNK:
            logger.debug("Skipping FTDC document of type %r", doc_type)
            continue
        blob = doc.get("data")
        if not isinstance(blob, bytes):
            raise FtdcDecodeError("Metrics chunk document has no binary 'data' field")
        chunks.append(decode_metrics_chunk(bytes(blob)))
    return chunks


def find_ftdc_files(directory: Path) -> list[Path]:
    """Return the FTDC files of a ``diagnostic.data`` directory in name order.

    ``metrics.interim`` sorts after the timestamped files, which keeps the
    chunks in capture order.
    """
    return sorted(p for p in directory.glob(FTDC_FILE_GLOB) if p.is_file())


def read_path(path: Path) -> list[RawChunk]:
    """Read and decode a diagnostic file or directory.

    Args:
        path (Path): An FTDC file, or a directory holding ``metrics.*`` files.

    Returns:
        list[RawChunk]: All chunks, in capture order.

    Raises:
        OSError: If the path is missing or unreadable.
        FtdcDecodeError: If a file is not a valid FTDC stream.
    """
    files: list[Path] = find_ftdc_files(path) if path.is_dir() else [path]
    if path.is_dir() and not files:
        logger.warning("No FTDC files found in %s", path)

    chunks: list[RawChunk] = []
    for file in files:
        logger.debug("Reading FTDC file %s", file)
        file_chunks: list[RawChunk] = decode(file.read_bytes())
        logger.info("Decoded %d chunk(s) from %s", len(file_chunks), file)
        chunks.extend(file_chunks)
    return chunks
