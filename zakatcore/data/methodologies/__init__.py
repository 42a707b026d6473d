"""Built-in methodology documents, keyed by registry identifier."""
from .amja import AMJA
from .bradford import BRADFORD
from .hanafi import HANAFI
from .hanbali import HANBALI
from .maliki import MALIKI
from .shafii import SHAFII
from .tahir_anwar import TAHIR_ANWAR

DEFAULT_METHODOLOGY_ID = 'bradford'

BUILTIN_METHODOLOGIES = {
    # Modern scholarly methodologies
    'bradford': BRADFORD,
    'amja': AMJA,
    'tahir_anwar': TAHIR_ANWAR,
    # Classical madhabs
    'hanafi': HANAFI,
    'shafii': SHAFII,
    'maliki': MALIKI,
    'hanbali': HANBALI,
}
