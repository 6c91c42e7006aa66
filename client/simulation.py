# client/simulation.py
"""
Scripted stand-ins for the facial recognition and crime correlation panels.

Nothing here analyses anything: progress steps are timed waits and the
results are fixed or randomly scored. `sleep` and `rng` are injectable so
tests run instantly and deterministically.
"""
import copy
import logging
import random
import time
from datetime import datetime, timezone

from client import demo_data

logger = logging.getLogger(__name__)

ETAPAS_RECONHECIMENTO = [
    "Analisando características faciais...",
    "Comparando com banco de dados...",
    "Calculando similaridades...",
    "Gerando resultados...",
]

ETAPAS_ANALISE = [
    "Coletando dados de todas as esquadras...",
    "Analisando padrões temporais...",
    "Identificando correlações geográficas...",
    "Analisando métodos operacionais...",
    "Correlacionando suspeitos...",
    "Gerando relatório final...",
]


def _now():
    return datetime.now(timezone.utc).isoformat()


def _run_steps(etapas, on_progress, sleep, step_delay):
    for i, etapa in enumerate(etapas, start=1):
        progresso = round(i / len(etapas) * 100, 2)
        logger.debug("%s (%s%%)", etapa, progresso)
        if on_progress:
            on_progress(etapa, progresso)
        sleep(step_delay)


class FacialRecognition:
    def __init__(self, pessoas=None, boletins=None, rng=None, sleep=time.sleep, step_delay=1.5):
        self.pessoas = pessoas if pessoas is not None else demo_data.PESSOAS
        self.boletins = boletins if boletins is not None else demo_data.BOLETINS
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.step_delay = step_delay

    def _last_occurrence(self, pessoa_id):
        related = [b for b in self.boletins
                   if any(e.get("pessoaId") == pessoa_id for e in b.get("envolvidos", []))]
        related.sort(key=lambda b: b.get("dataHoraOcorrencia") or "", reverse=True)
        return related[0] if related else None

    def run(self, imagem, on_progress=None):
        if not imagem:
            raise ValueError("Por favor, selecione uma imagem primeiro")

        _run_steps(ETAPAS_RECONHECIMENTO, on_progress, self.sleep, self.step_delay)

        com_foto = [p for p in self.pessoas if p.get("foto")]
        matches = []
        if com_foto:
            # a known suspect usually comes back with high confidence
            if self.rng.random() > 0.3:
                suspeito = next((p for p in com_foto if p.get("tipo") == "suspeito"), None)
                if suspeito:
                    matches.append({
                        "pessoa": suspeito,
                        "confianca": 85 + self.rng.random() * 10,
                        "ultimaOcorrencia": self._last_occurrence(suspeito["id"]),
                    })
            for pessoa in [p for p in com_foto if p.get("tipo") != "suspeito"][:2]:
                if self.rng.random() > 0.5:
                    matches.append({"pessoa": pessoa, "confianca": 60 + self.rng.random() * 20})

        matches.sort(key=lambda m: m["confianca"], reverse=True)
        if not matches:
            resultado = "nenhum_match"
        elif len(matches) == 1:
            resultado = "match_encontrado"
        else:
            resultado = "multiplos_matches"

        return {
            "imagemOriginal": imagem,
            "matches": matches,
            "resultado": resultado,
            "processadoEm": _now(),
        }


class CorrelationAnalysis:
    def __init__(self, correlacoes=None, sleep=time.sleep, step_delay=1.5):
        self.correlacoes = copy.deepcopy(correlacoes if correlacoes is not None else demo_data.CORRELACOES)
        self.padroes = self.detect_patterns()
        self.sleep = sleep
        self.step_delay = step_delay

    @staticmethod
    def detect_patterns():
        detected = _now()
        return [dict(p, deteccaoEm=detected) for p in copy.deepcopy(demo_data.PADROES)]

    def run_full_analysis(self, on_progress=None):
        _run_steps(ETAPAS_ANALISE, on_progress, self.sleep, self.step_delay)

        nova = {
            "id": str(len(self.correlacoes) + 1),
            "suspeitos": ["3", "5"],
            "boletins": ["1", "2", "3"],
            "padraoIdentificado": (
                "Análise automatizada identificou padrão multi-distrital: Suspeitos trabalham em "
                "coordenação entre Ingombota, Maianga e Sambizanga. Modus operandi: roubos em horário "
                "comercial com veículos de fuga pré-posicionados."
            ),
            "confianca": 93,
            "criadoEm": _now(),
            "status": "ativo",
        }
        self.correlacoes.append(nova)

        detected = _now()
        novos = [
            {"id": "5", "tipo": "temporal", "confianca": 89,
             "descricao": "Nova análise: Pico de criminalidade às quartas-feiras (67% dos crimes)",
             "dadosRelacionados": {"dia": "quarta-feira", "percentual": "67%"}, "deteccaoEm": detected},
            {"id": "6", "tipo": "geografico", "confianca": 91,
             "descricao": "Rota preferencial identificada: Fuga sempre em direção ao distrito de Sambizanga",
             "dadosRelacionados": {"rotaFuga": "Sambizanga", "frequencia": "90%"}, "deteccaoEm": detected},
        ]
        self.padroes.extend(novos)
        return nova, novos
