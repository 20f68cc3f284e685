"""Source data encodings understood by the ingestion service."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

_COMPRESSION_SUFFIXES = (".gz", ".zip")


class DataFormat(str, Enum):
    """Encoding format of the source data."""

    UNKNOWN = ""
    AVRO = "avro"  # Apache Avro
    APACHEAVRO = "apacheavro"  # Apache Avro, decoded with avro2json
    CSV = "csv"
    JSON = "json"  # one record per line
    MULTIJSON = "multijson"  # JSON arrays and/or concatenated documents
    ORC = "orc"
    PARQUET = "parquet"
    PSV = "psv"  # pipe separated
    RAW = "raw"  # whole file is a single string value
    SCSV = "scsv"  # semicolon separated
    SOHSV = "sohsv"  # SOH (0x01) separated
    SSTREAM = "sstream"  # Cosmos structured streams
    TSV = "tsv"
    TSVE = "tsve"  # escaped tab separated
    TXT = "txt"  # one line per record
    W3CLOGFILE = "w3clogfile"
    SINGLEJSON = "singlejson"  # a single JSON value, newlines are whitespace

    @property
    def camel_name(self) -> str:
        """Name used by the service on the wire, e.g. ``ApacheAvro``."""
        return _CAMEL_NAMES[self]

    @property
    def extension(self) -> str:
        """File extension that identifies this format, empty for ``UNKNOWN``."""
        if self is DataFormat.UNKNOWN:
            return ""
        if self is DataFormat.SSTREAM:
            return ".ss"
        return f".{self.value}"

    @property
    def is_valid_mapping_kind(self) -> bool:
        """Whether the format can be used as the kind of an ingestion mapping."""
        return self in MAPPING_KINDS

    @property
    def should_compress(self) -> bool:
        """Binary columnar and Avro payloads are already compressed."""
        return self not in _PRECOMPRESSED and self is not DataFormat.UNKNOWN

    @classmethod
    def parse(cls, value: str) -> DataFormat:
        """Resolve a format from its value or camel name, case-insensitively."""

        normalized = value.strip().lower().lstrip(".")
        for member in cls:
            if member is not cls.UNKNOWN and normalized in (member.value, member.camel_name.lower()):
                return member
        raise ValueError(f"Unsupported data format: {value!r}")

    @classmethod
    def infer(cls, filename: str) -> DataFormat:
        """Infer the format from a file name, looking through ``.gz``/``.zip`` suffixes.

        Returns ``UNKNOWN`` when the extension does not identify a format; callers
        then need an explicit ``file_format`` option.
        """
        path = PurePath(filename)
        if path.suffix.lower() in _COMPRESSION_SUFFIXES:
            path = path.with_suffix("")
        suffix = path.suffix.lower()
        for member in cls:
            if member is not cls.UNKNOWN and member.extension == suffix:
                return member
        return cls.UNKNOWN


_CAMEL_NAMES: dict[DataFormat, str] = {
    DataFormat.UNKNOWN: "",
    DataFormat.AVRO: "Avro",
    DataFormat.APACHEAVRO: "ApacheAvro",
    DataFormat.CSV: "Csv",
    DataFormat.JSON: "Json",
    DataFormat.MULTIJSON: "MultiJson",
    DataFormat.ORC: "Orc",
    DataFormat.PARQUET: "Parquet",
    DataFormat.PSV: "Psv",
    DataFormat.RAW: "Raw",
    DataFormat.SCSV: "Scsv",
    DataFormat.SOHSV: "Sohsv",
    DataFormat.SSTREAM: "SStream",
    DataFormat.TSV: "Tsv",
    DataFormat.TSVE: "Tsve",
    DataFormat.TXT: "Txt",
    DataFormat.W3CLOGFILE: "W3cLogFile",
    DataFormat.SINGLEJSON: "SingleJson",
}

MAPPING_KINDS = frozenset(
    {
        DataFormat.AVRO,
        DataFormat.APACHEAVRO,
        DataFormat.CSV,
        DataFormat.JSON,
        DataFormat.ORC,
        DataFormat.PARQUET,
    }
)

_PRECOMPRESSED = frozenset({DataFormat.AVRO, DataFormat.APACHEAVRO, DataFormat.ORC, DataFormat.PARQUET})


__all__ = ["DataFormat", "MAPPING_KINDS"]
