from .canonical import (
    CANONICAL_ALIASES,
    CANONICAL_FIELDS,
    IDENTITY_FIELD,
    CanonicalRecord,
    MergeStats,
    NormalizationResult,
    RawRecord,
)
from .errors import BomMergeError, IngestionError, NoDataError, NoValidFilesError
from .schemas import CONDENSED_COLUMNS, CONDENSED_HEADERS
