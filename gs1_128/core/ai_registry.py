"""
Application Identifier registry for the GS1-128 formatter.

Holds the per-identifier metadata the parser needs: kind of data, minimum and
maximum content length and whether the last digit is a mod-10 check digit.

AI families whose last digit gives the position of an implied decimal point
(310y, 392y, ...) are registered once, with the placeholder ``y`` as their
last character.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Last character of a decimal-variable AI family key
DECIMAL_PLACEHOLDER = 'y'


class KindOfData(str, Enum):
    """Grammar applied to the content of an AI."""
    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class AIData:
    """
    Metadata for a single Application Identifier.

    Attributes:
        ai: The Application Identifier code (2-4 characters, may end with
            the decimal placeholder)
        kind_of_data: Content grammar
        min_length: Minimum content length (check digit included)
        max_length: Maximum content length
        checksum: True if the last content digit is a mod-10 check digit
        title: Human-readable title
    """
    ai: str
    kind_of_data: KindOfData
    min_length: int
    max_length: int
    checksum: bool = False
    title: str = ""

    @property
    def has_decimal_placeholder(self) -> bool:
        return self.ai.lower().endswith(DECIMAL_PLACEHOLDER)

    def to_dict(self) -> dict:
        return {
            'ai': self.ai,
            'kind_of_data': self.kind_of_data.value,
            'min_length': self.min_length,
            'max_length': self.max_length,
            'checksum': self.checksum,
            'title': self.title,
        }

    @classmethod
    def from_dict(cls, info: dict) -> 'AIData':
        return cls(
            ai=info['ai'],
            kind_of_data=KindOfData(info.get('kind_of_data', KindOfData.ALPHANUMERIC.value)),
            min_length=int(info.get('min_length', 1)),
            max_length=int(info['max_length']),
            checksum=bool(info.get('checksum', False)),
            title=info.get('title', ''),
        )


class AIRegistry:
    """
    Read-only mapping of AI code to AIData.

    Built once from a collection of records; a later record with the same AI
    replaces an earlier one. Keys are stored lowercase so that ``310Y`` and
    ``310y`` name the same family.
    """

    def __init__(self, records: Iterable[AIData] = ()):
        entries: Dict[str, AIData] = {}
        for record in records:
            entries[record.ai.lower()] = record
        self._entries = MappingProxyType(entries)

    def get(self, ai: Optional[str]) -> Optional[AIData]:
        """Get AI data by exact code."""
        if ai is None:
            return None
        return self._entries.get(ai.lower())

    def records(self) -> List[AIData]:
        """Return the configured records in insertion order."""
        return list(self._entries.values())

    def __contains__(self, ai: object) -> bool:
        return isinstance(ai, str) and ai.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def to_json(self) -> str:
        """Export registry to JSON."""
        return json.dumps([record.to_dict() for record in self._entries.values()], indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'AIRegistry':
        """
        Load registry from JSON.

        Accepts either a list of records or an object keyed by AI code.
        """
        data = json.loads(json_str)
        if isinstance(data, dict):
            data = list(data.values())
        return cls(AIData.from_dict(info) for info in data)


# Syntax linters that turn a numeric component into a date or date/time
DATE_LINTERS = frozenset({'yymmdd', 'yymmd0'})
DATETIME_LINTERS = frozenset({'yymmddhh', 'yymmddhhmm'})


# GS1 AI table
# Specification syntax follows the GS1 Barcode Syntax Dictionary:
#   N = numeric, X = alphanumeric, Y = restricted alphanumeric
#   N14 fixed length, X..20 up to 20 characters, components separated by spaces
#   csum = trailing mod-10 check digit, yymmd0/yymmdd = date, yymmddhh = date/time
RAW_AI_DICTIONARY = """
# AI    Specification                     Title
00      N18,csum                          # SSCC
01      N14,csum                          # GTIN
02      N14,csum                          # CONTENT
10      X..20                             # BATCH/LOT
11      N6,yymmd0                         # PROD DATE
12      N6,yymmd0                         # DUE DATE
13      N6,yymmd0                         # PACK DATE
15      N6,yymmd0                         # BEST BEFORE or BEST BY
16      N6,yymmd0                         # SELL BY
17      N6,yymmd0                         # USE BY or EXPIRY
20      N2                                # VARIANT
21      X..20                             # SERIAL
22      X..20                             # CPV
235     X..28                             # TPX
240     X..30                             # ADDITIONAL ID
241     X..30                             # CUST. PART No.
242     N..6                              # MTO VARIANT
243     X..20                             # PCN
250     X..30                             # SECONDARY SERIAL
251     X..30                             # REF. TO SOURCE
253     N13,csum X..17                    # GDTI
254     X..20                             # GLN EXTENSION COMPONENT
255     N13,csum N..12                    # GCN
30      N..8                              # VAR. COUNT
310y    N6                                # NET WEIGHT (kg)
311y    N6                                # LENGTH (m)
312y    N6                                # WIDTH (m)
313y    N6                                # HEIGHT (m)
314y    N6                                # AREA (m2)
315y    N6                                # NET VOLUME (l)
316y    N6                                # NET VOLUME (m3)
320y    N6                                # NET WEIGHT (lb)
321y    N6                                # LENGTH (in)
322y    N6                                # LENGTH (ft)
323y    N6                                # LENGTH (yd)
324y    N6                                # WIDTH (in)
325y    N6                                # WIDTH (ft)
326y    N6                                # WIDTH (yd)
327y    N6                                # HEIGHT (in)
328y    N6                                # HEIGHT (ft)
329y    N6                                # HEIGHT (yd)
330y    N6                                # GROSS WEIGHT (kg)
331y    N6                                # LENGTH (m), log
332y    N6                                # WIDTH (m), log
333y    N6                                # HEIGHT (m), log
334y    N6                                # AREA (m2), log
335y    N6                                # VOLUME (l), log
336y    N6                                # VOLUME (m3), log
337y    N6                                # KG PER m2
340y    N6                                # GROSS WEIGHT (lb)
341y    N6                                # LENGTH (in), log
342y    N6                                # LENGTH (ft), log
343y    N6                                # LENGTH (yd), log
344y    N6                                # WIDTH (in), log
345y    N6                                # WIDTH (ft), log
346y    N6                                # WIDTH (yd), log
347y    N6                                # HEIGHT (in), log
348y    N6                                # HEIGHT (ft), log
349y    N6                                # HEIGHT (yd), log
350y    N6                                # AREA (in2)
351y    N6                                # AREA (ft2)
352y    N6                                # AREA (yd2)
353y    N6                                # AREA (in2), log
354y    N6                                # AREA (ft2), log
355y    N6                                # AREA (yd2), log
356y    N6                                # NET WEIGHT (t oz)
357y    N6                                # NET VOLUME (oz)
360y    N6                                # NET VOLUME (q)
361y    N6                                # NET VOLUME (gal)
362y    N6                                # VOLUME (q), log
363y    N6                                # VOLUME (gal), log
364y    N6                                # VOLUME (in3)
365y    N6                                # VOLUME (ft3)
366y    N6                                # VOLUME (yd3)
367y    N6                                # VOLUME (in3), log
368y    N6                                # VOLUME (ft3), log
369y    N6                                # VOLUME (yd3), log
37      N..8                              # COUNT
390y    N..15                             # AMOUNT
391y    N3 N..15                          # AMOUNT
392y    N..15                             # PRICE
393y    N3 N..15                          # PRICE
394y    N4                                # PRCNT OFF
395y    N6                                # PRICE/UoM
400     X..30                             # ORDER NUMBER
401     X..30                             # GINC
402     N17,csum                          # GSIN
403     X..30                             # ROUTE
410     N13,csum                          # SHIP TO LOC
411     N13,csum                          # BILL TO
412     N13,csum                          # PURCHASE FROM
413     N13,csum                          # SHIP FOR LOC
414     N13,csum                          # LOC No.
415     N13,csum                          # PAY TO
416     N13,csum                          # PROD/SERV LOC
417     N13,csum                          # PARTY
420     X..20                             # SHIP TO POST
421     N3 X..9                           # SHIP TO POST
422     N3                                # ORIGIN
423     N..15                             # COUNTRY - INITIAL PROCESS
424     N3                                # COUNTRY - PROCESS
425     N..15                             # COUNTRY - DISASSEMBLY
426     N3                                # COUNTRY - FULL PROCESS
427     X..3                              # ORIGIN SUBDIVISION
4300    X..35                             # SHIP TO COMP
4301    X..35                             # SHIP TO NAME
4302    X..70                             # SHIP TO ADD1
4307    X2                                # SHIP TO COUNTRY
4308    X..30                             # SHIP TO PHONE
4309    N20                               # SHIP TO GEO
4321    N1                                # DANGEROUS GOODS
4322    N1                                # AUTH LEAVE
4323    N1                                # SIG REQUIRED
4324    N10,yymmddhh                      # NBEF DEL DT
4325    N10,yymmddhh                      # NAFT DEL DT
4326    N6,yymmdd                         # REL DATE
7001    N13                               # NSN
7002    X..30                             # MEAT CUT
7003    N10,yymmddhh                      # EXPIRY TIME
7004    N..4                              # ACTIVE POTENCY
7005    X..12                             # CATCH AREA
7006    N6,yymmdd                         # FIRST FREEZE DATE
7007    N6,yymmdd N..6                    # HARVEST DATE
7008    X..3                              # AQUATIC SPECIES
7009    X..10                             # FISHING GEAR TYPE
7010    X..2                              # PROD METHOD
7011    N6,yymmdd N..4                    # TEST BY DATE
7020    X..20                             # REFURB LOT
7021    X..20                             # FUNC STAT
7022    X..20                             # REV STAT
7023    X..30                             # GIAI - ASSEMBLY
7030    N3 X..27                          # PROCESSOR # 0
7031    N3 X..27                          # PROCESSOR # 1
7032    N3 X..27                          # PROCESSOR # 2
7033    N3 X..27                          # PROCESSOR # 3
7034    N3 X..27                          # PROCESSOR # 4
7035    N3 X..27                          # PROCESSOR # 5
7036    N3 X..27                          # PROCESSOR # 6
7037    N3 X..27                          # PROCESSOR # 7
7038    N3 X..27                          # PROCESSOR # 8
7039    N3 X..27                          # PROCESSOR # 9
710     X..20                             # NHRN PZN
711     X..20                             # NHRN CIP
712     X..20                             # NHRN CN
713     X..20                             # NHRN DRN
714     X..20                             # NHRN AIM
715     X..20                             # NHRN NDC
8001    N14                               # DIMENSIONS
8002    X..20                             # CMT No.
8003    N1 N13 X..16                      # GRAI
8004    X..30                             # GIAI
8005    N6                                # PRICE PER UNIT
8006    N14 N2 N2                         # ITIP
8007    X..34                             # IBAN
8008    N8,yymmddhh N..4                  # PROD TIME
8010    Y..30                             # CPID
8011    N..12                             # CPID SERIAL
8012    X..20                             # VERSION
8013    X..25                             # GMN
8017    N18,csum                          # GSRN - PROVIDER
8018    N18,csum                          # GSRN - RECIPIENT
8019    N..10                             # SRIN
8020    X..25                             # REF No.
8026    N14 N2 N2                         # ITIP CONTENT
8110    X..70                             # COUPON CODE
8111    N4                                # POINTS
8112    X..70                             # COUPON OFFER
8200    X..70                             # PRODUCT URL
90      X..30                             # INTERNAL
91      X..90                             # INTERNAL
92      X..90                             # INTERNAL
93      X..90                             # INTERNAL
94      X..90                             # INTERNAL
95      X..90                             # INTERNAL
96      X..90                             # INTERNAL
97      X..90                             # INTERNAL
98      X..90                             # INTERNAL
99      X..90                             # INTERNAL
"""


def _parse_syntax_spec(spec: str) -> Tuple[str, int, int, List[str]]:
    """
    Parse one component of a GS1 syntax specification.

    Examples:
        "N14" -> ('N', 14, 14, [])
        "X..20" -> ('X', 1, 20, [])
        "N6,yymmd0" -> ('N', 6, 6, ['yymmd0'])
        "N14,csum" -> ('N', 14, 14, ['csum'])

    Returns:
        (data_type, min_length, max_length, linters)
    """
    parts = spec.split(',')
    type_len = parts[0]
    linters = parts[1:]

    data_type = type_len[0]
    len_spec = type_len[1:]

    if '..' in len_spec:
        # Variable length: "..20" means 1-20
        min_len, max_len = 1, int(len_spec.replace('..', ''))
    elif len_spec:
        min_len = max_len = int(len_spec)
    else:
        min_len = max_len = 0

    return data_type, min_len, max_len, linters


def _create_ai_data(ai: str, spec: str, title: str) -> AIData:
    """Create an AIData record from a (possibly multi-component) syntax specification."""
    parts = spec.split()
    components = [_parse_syntax_spec(part) for part in parts]
    variable = ['..' in part for part in parts]

    max_length = sum(max_len for _, _, max_len, _ in components)
    # Optional trailing components do not count towards the minimum
    min_length = sum(
        min_len for (_, min_len, _, _), is_var in zip(components, variable) if not is_var
    ) or 1

    linters = {linter for _, _, _, comp_linters in components for linter in comp_linters}

    if linters & DATETIME_LINTERS:
        kind = KindOfData.DATETIME
    elif len(components) == 1 and linters & DATE_LINTERS:
        kind = KindOfData.DATE
    elif all(data_type == 'N' for data_type, _, _, _ in components):
        kind = KindOfData.NUMERIC
    else:
        kind = KindOfData.ALPHANUMERIC

    # The check digit is appended at the end of the content, so it is only
    # meaningful when the checked component is the only fixed one
    checksum = 'csum' in components[0][3] and all(variable[1:])

    return AIData(
        ai=ai,
        kind_of_data=kind,
        min_length=min_length,
        max_length=max_length,
        checksum=checksum,
        title=title,
    )


def _parse_raw_dictionary() -> List[AIData]:
    """Parse the raw AI table into AIData records."""
    records = []

    for line in RAW_AI_DICTIONARY.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        # Parse line format: AI Specification # Title
        main_part, _, title = line.partition('#')
        tokens = main_part.split()
        if len(tokens) < 2:
            continue

        records.append(_create_ai_data(tokens[0], ' '.join(tokens[1:]), title.strip()))

    return records


# Global cached default registry
_cached_registry: Optional[AIRegistry] = None


def load_default_registry(force_reload: bool = False) -> AIRegistry:
    """
    Load the built-in GS1 registry, using cache when possible.

    Args:
        force_reload: Rebuild from the embedded table even if cached.

    Returns:
        AIRegistry instance ready for use.
    """
    global _cached_registry

    if _cached_registry is None or force_reload:
        _cached_registry = AIRegistry(_parse_raw_dictionary())
        logger.debug("Built default AI registry with %d identifiers", len(_cached_registry))

    return _cached_registry


def load_registry(json_path: Path) -> AIRegistry:
    """Load a registry from a JSON file written by ``save_registry``."""
    with open(json_path, 'r', encoding='utf-8') as f:
        registry = AIRegistry.from_json(f.read())
    logger.debug("Loaded %d identifiers from %s", len(registry), json_path)
    return registry


def save_registry(registry: AIRegistry, json_path: Path) -> None:
    """Save a registry to a JSON file."""
    with open(json_path, 'w', encoding='utf-8') as f:
        f.write(registry.to_json())
