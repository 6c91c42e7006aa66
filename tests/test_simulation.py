import pytest

from client import demo_data
from client.simulation import (
    ETAPAS_ANALISE, ETAPAS_RECONHECIMENTO, CorrelationAnalysis, FacialRecognition,
)


class FixedRng:
    """Replays the given values for random(); repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if len(self.values) > 1 else self.values[0]


def no_sleep(seconds):
    pass


def test_recognition_requires_image():
    with pytest.raises(ValueError):
        FacialRecognition(sleep=no_sleep).run("")


def test_recognition_reports_every_step():
    progress = []
    FacialRecognition(rng=FixedRng(0.0), sleep=no_sleep).run("foto.jpg", lambda e, p: progress.append((e, p)))
    assert [e for e, _ in progress] == ETAPAS_RECONHECIMENTO
    assert progress[-1][1] == 100


def test_recognition_no_match():
    result = FacialRecognition(rng=FixedRng(0.0), sleep=no_sleep).run("foto.jpg")
    assert result["resultado"] == "nenhum_match"
    assert result["matches"] == []
    assert result["imagemOriginal"] == "foto.jpg"


def test_recognition_single_suspect_match():
    # suspect roll passes, confidence roll, then both witness rolls fail
    result = FacialRecognition(rng=FixedRng(0.9, 0.5, 0.1, 0.1), sleep=no_sleep).run("foto.jpg")
    assert result["resultado"] == "match_encontrado"
    match = result["matches"][0]
    assert match["pessoa"]["tipo"] == "suspeito"
    assert match["confianca"] == pytest.approx(90)
    assert "ultimaOcorrencia" in match


def test_recognition_multiple_matches_sorted():
    pessoas = [dict(p, foto=p.get("foto") or f"/fotos/{p['id']}.jpg") for p in demo_data.PESSOAS]
    result = FacialRecognition(pessoas=pessoas, rng=FixedRng(0.9), sleep=no_sleep).run("foto.jpg")
    scores = [m["confianca"] for m in result["matches"]]
    assert len(scores) > 1
    assert result["resultado"] == "multiplos_matches"
    assert scores == sorted(scores, reverse=True)


def test_recognition_without_photos():
    pessoas = [dict(p, foto=None) for p in demo_data.PESSOAS]
    result = FacialRecognition(pessoas=pessoas, rng=FixedRng(0.99), sleep=no_sleep).run("foto.jpg")
    assert result["resultado"] == "nenhum_match"


def test_correlation_starts_with_shipped_data():
    analysis = CorrelationAnalysis(sleep=no_sleep)
    assert len(analysis.correlacoes) == len(demo_data.CORRELACOES)
    assert len(analysis.padroes) == len(demo_data.PADROES)
    assert all("deteccaoEm" in p for p in analysis.padroes)


def test_full_analysis_appends_results():
    progress = []
    analysis = CorrelationAnalysis(sleep=no_sleep)
    nova, novos = analysis.run_full_analysis(lambda e, p: progress.append(e))

    assert progress == ETAPAS_ANALISE
    assert nova["id"] == str(len(demo_data.CORRELACOES) + 1)
    assert nova["confianca"] == 93
    assert nova["suspeitos"] == ["3", "5"]
    assert analysis.correlacoes[-1] is nova
    assert [p["id"] for p in novos] == ["5", "6"]
    assert analysis.padroes[-2:] == novos
    # shipped data is untouched
    assert len(demo_data.CORRELACOES) == 2
