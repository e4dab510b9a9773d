# tests/test_scope_classifier.py
"""
Tests for the territorial scope scorer and its tie-break order.
"""
from __future__ import annotations

from gestor_fichas.domain.schemas.extracted_fields import ScopeScores, TerritorialScope
from gestor_fichas.service.scope_classifier_service import (
    ScopeClassifierService,
    classify_scope,
    resolve_scope,
    score_scope,
)


class TestCueScoring:
    def test_eu_cue(self):
        assert classify_scope("Programa gestionado por la Comisión Europea") == TerritorialScope.EU

    def test_state_cue(self):
        assert classify_scope("Convocada mediante Real Decreto") == TerritorialScope.STATE

    def test_region_cue(self):
        assert classify_scope("Orden de la Xunta de Galicia") == TerritorialScope.REGION

    def test_each_cue_counts_once(self):
        scores = score_scope("ministerio ministerio ministerio")
        assert scores.state == 1

    def test_no_cues_leaves_scope_unset(self):
        text = "Texto sin pistas territoriales"
        assert score_scope(text) == ScopeScores(0, 0, 0, 0)
        assert classify_scope(text) is None

    def test_empty_text(self):
        assert classify_scope("") is None


class TestTieBreak:
    def test_state_beats_eu(self):
        text = "Ayuda del ministerio con fondos europeos"
        assert score_scope(text) == ScopeScores(eu=1, state=1, region=0, province=0)
        assert classify_scope(text) == TerritorialScope.STATE

    def test_region_beats_state(self):
        text = "Orden de la consejería y del ministerio"
        assert score_scope(text) == ScopeScores(eu=0, state=1, region=1, province=0)
        assert classify_scope(text) == TerritorialScope.REGION

    def test_province_wins_every_tie(self):
        assert resolve_scope(ScopeScores(2, 2, 2, 2)) == TerritorialScope.PROVINCE

    def test_highest_score_wins_over_priority(self):
        assert resolve_scope(ScopeScores(eu=3, state=1, region=0, province=2)) == TerritorialScope.EU

    def test_all_zero(self):
        assert resolve_scope(ScopeScores()) is None


class TestProvinceEvidence:
    def test_province_name_outweighs_region_cue(self):
        text = "Diputación de Huesca. Colabora la Generalitat de Catalunya"
        # diputación cue plus huesca, which counts double
        assert score_scope(text) == ScopeScores(eu=0, state=0, region=1, province=3)
        assert classify_scope(text) == TerritorialScope.PROVINCE

    def test_parenthesized_province_bonus(self):
        # ayuntamiento (1) + huesca (2) + parenthesis (3)
        assert score_scope("Ayuntamiento de Jaca (Huesca)").province == 6

    def test_only_first_parenthesis_is_checked(self):
        # ayuntamiento (1) + teruel (2); first span "(2024)" names no province
        assert score_scope("Programa (2024) del ayuntamiento de Teruel (Teruel)").province == 3

    def test_accented_name_matches_as_word(self):
        scores = score_scope("Subvención de Álava")
        assert scores.province == 2

    def test_partial_word_does_not_match(self):
        assert classify_scope("Asociación leonesa de vecinos") is None

    def test_multi_word_province(self):
        assert score_scope("Isla de Santa Cruz de Tenerife").province == 4  # full name + tenerife


class TestAutonomousCommunity:
    def test_with_province_name_shifts_to_province(self):
        text = "Comunidad Autónoma de Aragón, provincia de Zaragoza"
        assert score_scope(text) == ScopeScores(eu=0, state=0, region=0, province=5)
        assert classify_scope(text) == TerritorialScope.PROVINCE

    def test_region_penalty_is_floored_at_zero(self):
        scores = score_scope("Consejería de la Comunidad Autonoma; sede en Murcia")
        assert scores.region == 0
        assert scores.province == 4

    def test_accented_spelling_triggers(self):
        assert score_scope("Comunidad Autónoma de Aragón, provincia de Zaragoza").province == 5
        assert score_scope("la comunidad autónoma concede").region == 1

    def test_without_province_name_adds_to_region(self):
        text = "Ayuda de la Comunidad Autónoma para autónomos"
        assert score_scope(text) == ScopeScores(eu=0, state=0, region=1, province=0)
        assert classify_scope(text) == TerritorialScope.REGION


class TestService:
    def test_service_matches_functions(self):
        svc = ScopeClassifierService()
        text = "Diputación de Huesca"
        assert svc.score(text) == score_scope(text)
        assert svc.classify(text) == TerritorialScope.PROVINCE


class TestLineTerminators:
    def test_cue_does_not_span_carriage_return(self):
        assert score_scope("reglamento x\r(ue)").eu == 0
        assert score_scope("reglamento 2021/241 (ue)").eu == 1

    def test_cue_does_not_span_line_separator(self):
        assert score_scope("departamento de empleo\u2028gobierno vasco").region == 1
        assert score_scope("departamento de empleo del gobierno vasco").region == 2

    def test_law_number_needs_ascii_digits(self):
        assert score_scope("ley ٣/٢٠٢٠").state == 0
        assert score_scope("ley 3/2020").state == 1
