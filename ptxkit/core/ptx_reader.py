"""
Streaming reader for multi-scan PTX files.
A PTX file holds one or more scans, each a 10-line header followed by
columns * rows point records. Points are handed to a sink supplied by the
caller for every scan, without being buffered.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from .config import ReaderConfig
from .exceptions import EndOfStream, HeaderError, NumberFormatError, RecordError, TruncatedScanError
from .textio import LineReader, Tokenizer, parse_float, parse_uint, parse_uint8
from ..models.scan import (
    Point,
    PointSink,
    RasterDimensions,
    RasterPosition,
    RegistrationParameters,
    ScanInfo,
    Vector3,
)

logger = logging.getLogger(__name__)

HEADER_LINES = 10
RECORD_FIELDS = 7

NewScanCallback = Callable[[ScanInfo], PointSink]


class HeaderStatus(str, Enum):
    """Outcome of reading a scan header"""

    OK = "ok"
    END_OF_STREAM = "end_of_stream"
    MALFORMED = "malformed"


class ReaderState(str, Enum):
    AWAITING_HEADER = "awaiting_header"
    STREAMING_POINTS = "streaming_points"
    DONE = "done"


@dataclass
class HeaderResult:
    status: HeaderStatus
    info: ScanInfo = field(default_factory=ScanInfo)
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is HeaderStatus.OK


def parse_vector3(line: str, tokenizer: Tokenizer) -> Vector3:
    """
    Parse the first three fields of a line as floats.

    Extra fields are ignored.

    Raises:
        NumberFormatError: If fewer than three fields are present or one of
            them is not a number
    """
    tokens = tokenizer.tokenize(line)
    if len(tokens) < 3:
        raise NumberFormatError(line, "3-vector")
    return parse_float(tokens[0]), parse_float(tokens[1]), parse_float(tokens[2])


def read_header(lines: LineReader, tokenizer: Tokenizer) -> HeaderResult:
    """
    Consume the 10 header lines of the next scan.

    Header lines, in order: columns, rows, scanner origin, scanner x, y and z
    axes, three rotation rows and the translation. The scanner origin and
    axes are validated but not kept.

    Returns:
        HeaderResult with status OK and the scan info, END_OF_STREAM when no
        further scan is present, or MALFORMED when the header is incomplete
        or holds an invalid value. Never raises for bad input.
    """
    if lines.at_end():
        return HeaderResult(HeaderStatus.END_OF_STREAM)

    start = lines.line_number + 1
    try:
        columns = parse_uint(lines.getline())
        rows = parse_uint(lines.getline())

        # scanner origin and x/y/z axes
        for _ in range(4):
            parse_vector3(lines.getline(), tokenizer)

        rotation = (
            parse_vector3(lines.getline(), tokenizer),
            parse_vector3(lines.getline(), tokenizer),
            parse_vector3(lines.getline(), tokenizer),
        )
        translation = parse_vector3(lines.getline(), tokenizer)
    except NumberFormatError as e:
        return HeaderResult(
            HeaderStatus.MALFORMED,
            message=f"Invalid header line {lines.line_number} (header starts at line {start}): {e}",
        )
    except EndOfStream:
        return HeaderResult(
            HeaderStatus.MALFORMED,
            message=f"Input ended inside the header starting at line {start}",
        )

    info = ScanInfo(
        dimensions=RasterDimensions(columns=columns, rows=rows),
        registration=RegistrationParameters(rotation=rotation, translation=translation),
    )
    return HeaderResult(HeaderStatus.OK, info=info)


def parse_point(line: str, position: RasterPosition, tokenizer: Tokenizer, line_number: Optional[int] = None) -> Point:
    """
    Build a point from a record line of exactly 7 fields: x y z intensity r g b.

    Raises:
        RecordError: If the field count is not 7 or a field is not numeric
    """
    tokens = tokenizer.tokenize(line)
    if len(tokens) != RECORD_FIELDS:
        raise RecordError(
            f"Expected {RECORD_FIELDS} fields in point record, found {len(tokens)}", line_number
        )

    try:
        return Point(
            position=position,
            x=parse_float(tokens[0]),
            y=parse_float(tokens[1]),
            z=parse_float(tokens[2]),
            intensity=parse_float(tokens[3]),
            r=parse_uint8(tokens[4]),
            g=parse_uint8(tokens[5]),
            b=parse_uint8(tokens[6]),
        )
    except NumberFormatError as e:
        raise RecordError(str(e), line_number) from e


class PtxFile:
    """
    A PTX file on disk.

    Usage:
        def on_scan(info):
            return MySink()

        PtxFile("scan.ptx").read_scans(on_scan)
    """

    def __init__(self, file_path: str, config: Optional[ReaderConfig] = None):
        self.file_path = str(file_path)
        self.config = config or ReaderConfig()
        self.last_header_status: Optional[HeaderStatus] = None

    def read_scans(self, callback: NewScanCallback) -> int:
        """
        Stream every scan of the file.

        Args:
            callback: Called with the ScanInfo of each scan before its points;
                must return the sink receiving that scan's points

        Returns:
            Number of scans delivered

        Raises:
            RecordError: If a point record is corrupt or the file ends inside
                a scan. Points already delivered stay delivered.
            HeaderError: On a malformed header when strict_headers is set
        """
        logger.info(f"Reading PTX file {self.file_path}")
        with open(self.file_path, "r") as f:
            return self.read_scans_from(f, callback)

    def read_scans_from(self, source: Iterable[str], callback: NewScanCallback) -> int:
        """Stream every scan from an iterable of text lines."""
        lines = LineReader(source)
        tokenizer = Tokenizer(self.config.delimiter)

        state = ReaderState.AWAITING_HEADER
        scan_count = 0
        info = ScanInfo()
        self.last_header_status = None

        while state is not ReaderState.DONE:
            if state is ReaderState.AWAITING_HEADER:
                header = read_header(lines, tokenizer)
                self.last_header_status = header.status

                if header.status is HeaderStatus.OK:
                    info = header.info
                    state = ReaderState.STREAMING_POINTS
                elif header.status is HeaderStatus.END_OF_STREAM:
                    logger.debug(f"End of input after {scan_count} scans")
                    state = ReaderState.DONE
                else:
                    if self.config.strict_headers:
                        raise HeaderError(header.message)
                    logger.warning(f"Stopping after {scan_count} scans: {header.message}")
                    state = ReaderState.DONE

            elif state is ReaderState.STREAMING_POINTS:
                dimensions = info.dimensions
                logger.info(
                    f"Scan {scan_count}: {dimensions.columns} columns x {dimensions.rows} rows"
                )
                sink = callback(info)
                self._stream_points(lines, tokenizer, dimensions, sink)
                scan_count += 1
                logger.debug(f"Scan {scan_count - 1}: delivered {dimensions.count} records")

                state = ReaderState.DONE if lines.at_end() else ReaderState.AWAITING_HEADER
                if state is ReaderState.DONE:
                    self.last_header_status = HeaderStatus.END_OF_STREAM

        logger.info(f"Read {scan_count} scans")
        return scan_count

    @staticmethod
    def _stream_points(
        lines: LineReader, tokenizer: Tokenizer, dimensions: RasterDimensions, sink: PointSink
    ) -> None:
        total = dimensions.count
        for index in range(total):
            position = dimensions.position(index)
            try:
                line = lines.getline()
            except EndOfStream as e:
                raise TruncatedScanError(
                    f"Input ended after {index} of {total} records of a scan", lines.line_number
                ) from e
            sink.insert(parse_point(line, position, tokenizer, lines.line_number))
