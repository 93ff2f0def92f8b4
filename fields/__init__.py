from .condensed import condense
from .headers import canonicalize_header, map_row
from .merge import identity_key, merge_fill, merge_records, normalize
