from __future__ import annotations

import re
from typing import Optional, Tuple

from gestor_fichas.domain.ports.Classifier_provider import Scope_classifier
from gestor_fichas.domain.schemas.extracted_fields import ScopeScores, TerritorialScope


# Any run of characters short of a line terminator.
_ANY = r"[^\n\r\u2028\u2029]*"


def _cues(scope: TerritorialScope, *patterns: str) -> Tuple[Tuple[TerritorialScope, re.Pattern[str]], ...]:
    return tuple((scope, re.compile(p, re.I)) for p in patterns)


# Each matching cue adds 1 to its scope. Tested against the lowercased text.
SCOPE_CUES: Tuple[Tuple[TerritorialScope, re.Pattern[str]], ...] = (
    _cues(
        TerritorialScope.EU,
        r"unión europea",
        r"union europea",
        r"ue\s",
        r"europa\s",
        r"european",
        r"comisión europea",
        r"comision europea",
        r"fondos europeos",
        r"programa europeo",
        r"directiva europea",
        r"reglamento\s" + _ANY + r"\(ue\)",
    )
    + _cues(
        TerritorialScope.STATE,
        r"ministerio",
        r"gobierno de españa",
        r"administración general del estado",
        r"age\s",
        r"estatal",
        r"nacional",
        r"real decreto",
        r"ley\s+[0-9]+/[0-9]+",
        r"boletín oficial del estado",
        r"boe\s",
        r"presupuestos generales del estado",
        r"secretaría de estado",
        r"subsecretaría",
    )
    + _cues(
        TerritorialScope.REGION,
        r"junta de andalucía",
        r"junta de andalucia",
        r"generalitat de catalunya",
        r"generalitat valenciana",
        r"gobierno vasco",
        r"gobierno de navarra",
        r"principado de asturias",
        r"región de murcia",
        r"region de murcia",
        r"consejería",
        r"conselleria",
        r"departamento" + _ANY + r"gobierno vasco",
        r"decreto" + _ANY + r"[0-9]+/[0-9]+" + _ANY + r"comunidad",
        r"autonómica",
        r"autonomica",
        r"xunta de galicia",
        r"gobierno de aragón",
        r"gobierno de aragon",
        r"gobierno de canarias",
        r"gobierno de cantabria",
        r"junta de castilla",
        r"junta de extremadura",
        r"gobierno de la rioja",
        r"comunidad de madrid",
    )
    + _cues(
        TerritorialScope.PROVINCE,
        r"diputación",
        r"diputacio",
        r"provincia",
        r"provincial",
        r"consell comarcal",
        r"comarca",
        r"cabildo",
        r"consejo insular",
        r"ajuntament|ayuntamiento",
        r"municipi",
        r"municipal",
        r"alcaldía",
        r"alcaldia",
        r"concejo",
    )
)

PROVINCES: Tuple[str, ...] = (
    "álava", "alava", "albacete", "alicante", "almería", "almeria", "asturias", "ávila", "avila",
    "badajoz", "barcelona", "burgos", "cáceres", "caceres", "cádiz", "cadiz", "cantabria",
    "castellón", "castellon", "ciudad real", "córdoba", "cordoba", "cuenca", "girona",
    "granada", "guadalajara", "guipúzcoa", "guipuzcoa", "huelva", "huesca", "jaén", "jaen",
    "león", "leon", "lérida", "lerida", "lleida", "lugo", "madrid", "málaga", "malaga",
    "murcia", "navarra", "ourense", "orense", "palencia", "palma", "baleares", "pontevedra",
    "rioja", "salamanca", "segovia", "sevilla", "soria", "tarragona", "teruel", "toledo",
    "valencia", "valladolid", "vizcaya", "bizkaia", "zamora", "zaragoza", "ceuta", "melilla",
    "las palmas", "santa cruz de tenerife", "tenerife",
)

PROVINCE_RES: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(r"\b" + re.escape(name) + r"\b", re.I) for name in PROVINCES
)

PROVINCE_NAME_WEIGHT = 2
PARENTHESIS_BONUS = 3
AUTONOMOUS_COMMUNITY_BONUS = 2

PARENTHESIS_RE = re.compile(r"\(([^)]+)\)")
AUTONOMOUS_COMMUNITY_RE = re.compile(r"comunidad aut[oó]n[oó]ma", re.I)

# Ties go to the most specific level.
PRIORITY: Tuple[TerritorialScope, ...] = (
    TerritorialScope.PROVINCE,
    TerritorialScope.REGION,
    TerritorialScope.STATE,
    TerritorialScope.EU,
)


def _has_province_name(lowered: str) -> bool:
    return any(rx.search(lowered) for rx in PROVINCE_RES)


def score_scope(text: str) -> ScopeScores:
    """Score the four territorial levels for `text`.

    Generic cues weigh 1, whole-word province names 2 (Unicode word
    boundaries, so accented names such as "Álava" match), a province named in
    the first parenthesized span adds 3, and an explicit "comunidad autónoma"
    shifts weight towards the province when one is also named.
    """
    lowered = text.lower()
    counts = {scope: 0 for scope in TerritorialScope}

    for scope, rx in SCOPE_CUES:
        if rx.search(lowered):
            counts[scope] += 1

    for rx in PROVINCE_RES:
        if rx.search(lowered):
            counts[TerritorialScope.PROVINCE] += PROVINCE_NAME_WEIGHT

    m = PARENTHESIS_RE.search(text)
    if m:
        inside = m.group(1).lower().strip()
        if any(name in inside for name in PROVINCES):
            counts[TerritorialScope.PROVINCE] += PARENTHESIS_BONUS

    if AUTONOMOUS_COMMUNITY_RE.search(text):
        if _has_province_name(lowered):
            counts[TerritorialScope.PROVINCE] += AUTONOMOUS_COMMUNITY_BONUS
            counts[TerritorialScope.REGION] = max(0, counts[TerritorialScope.REGION] - 1)
        else:
            counts[TerritorialScope.REGION] += 1

    return ScopeScores(
        eu=counts[TerritorialScope.EU],
        state=counts[TerritorialScope.STATE],
        region=counts[TerritorialScope.REGION],
        province=counts[TerritorialScope.PROVINCE],
    )


def resolve_scope(scores: ScopeScores) -> Optional[TerritorialScope]:
    by_scope = {
        TerritorialScope.EU: scores.eu,
        TerritorialScope.STATE: scores.state,
        TerritorialScope.REGION: scores.region,
        TerritorialScope.PROVINCE: scores.province,
    }
    best = max(by_scope.values())
    if best == 0:
        return None
    for scope in PRIORITY:
        if by_scope[scope] == best:
            return scope
    return None


def classify_scope(text: str) -> Optional[TerritorialScope]:
    return resolve_scope(score_scope(text))


class ScopeClassifierService(Scope_classifier):
    def score(self, text: str) -> ScopeScores:
        return score_scope(text)

    def classify(self, text: str) -> Optional[TerritorialScope]:
        return classify_scope(text)
