# client/credentials.py
import copy
import json
import logging
import random
import re
import time

from client.demo_data import POLICIAIS_AUTORIZADOS
from constants import MATRICULA_PATTERN, POSTOS

logger = logging.getLogger(__name__)

POLICIAIS_KEY = "bo_policiais"
MIN_SENHA = 4


class RegistrationError(ValueError):
    pass


def generate_matricula(rng=random):
    return f"PN{rng.randint(100000, 999999)}"


class CredentialStore:
    """Officer credentials known to this client.

    Starts from the shipped list, or from the copy persisted under
    `bo_policiais`. Self-registered officers are appended and the whole
    list is written back, passwords included.
    """

    def __init__(self, storage, seed=None):
        self.storage = storage
        self.policiais = copy.deepcopy(seed if seed is not None else POLICIAIS_AUTORIZADOS)

        saved = storage.get_item(POLICIAIS_KEY)
        if saved:
            try:
                loaded = json.loads(saved)
                if not isinstance(loaded, list) or not all(isinstance(p, dict) for p in loaded):
                    raise ValueError("expected a list of officers")
                self.policiais = loaded
            except ValueError as e:
                logger.error("Erro ao carregar policiais salvos: %s", e)
                storage.remove_item(POLICIAIS_KEY)

    def find(self, matricula, accepts):
        """First officer with this matricula (case-insensitive) for which `accepts(officer)` holds."""
        wanted = matricula.upper()
        for p in self.policiais:
            if str(p.get("matricula", "")).upper() == wanted and accepts(p):
                return p
        return None

    def add(self, policial):
        self.policiais.append(policial)
        self.storage.set_item(POLICIAIS_KEY, json.dumps(self.policiais, ensure_ascii=False))

    def register(self, nome, posto, matricula, senha, confirmar_senha, officer_id=None):
        nome = (nome or "").strip()
        matricula = (matricula or "").strip()
        if not nome:
            raise RegistrationError("Nome completo é obrigatório")
        if not posto:
            raise RegistrationError("Posto/Patente é obrigatório")
        if posto not in POSTOS:
            raise RegistrationError(f"Posto inválido: {posto}")
        if not matricula:
            raise RegistrationError("Matrícula é obrigatória")
        if not re.match(MATRICULA_PATTERN, matricula):
            raise RegistrationError("Matrícula deve ter o formato PN000000")
        if not (senha or "").strip():
            raise RegistrationError("Palavra-passe é obrigatória")
        if len(senha) < MIN_SENHA:
            raise RegistrationError(f"Palavra-passe deve ter pelo menos {MIN_SENHA} caracteres")
        if senha != confirmar_senha:
            raise RegistrationError("As palavras-passe não coincidem")
        if self.find(matricula, lambda p: True):
            raise RegistrationError("Matrícula já cadastrada")

        policial = {
            "id": officer_id or str(int(time.time() * 1000)),
            "nome": nome,
            "posto": posto,
            "matricula": matricula,
            "senha": senha,
        }
        self.add(policial)
        logger.info("Policial %s (%s) registado localmente", nome, matricula)
        return {k: v for k, v in policial.items() if k != "senha"}
