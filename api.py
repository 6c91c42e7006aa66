# api.py
import json
import logging
import uuid

from flask import Blueprint, current_app, jsonify, request

import constants as c
from schemas import (
    BoletimCreate, BoletimUpdate, BuscaFiltros, LoginRequest, PessoaCreate, PessoaUpdate,
    SignupRequest, parse_body,
)
from utils.audit import log_action, now_iso, parse_iso, recent_logs
from utils.auth import check_credentials, create_credentials
from utils.errors import AuthError, Conflict, NotFound, ValidationError, handle_errors
from utils.jwt_auth import auth_required, current_officer_id, issue_token
from utils.kv_store import KVStore, UniqueIndex
from utils.resources import Resource

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)


# ---------- RESOURCES ----------
def matricula_index(store):
    return UniqueIndex(store, "policial:matricula", "Matrícula já cadastrada")


def policiais(store):
    return Resource(store, "policial", ["nome", "matricula"], "Dados do policial não encontrados",
                    unique={"matricula": matricula_index(store)})


def pessoas(store):
    return Resource(store, "pessoa", ["nome"], "Pessoa não encontrada",
                    created_field="criadaEm", updated_field="atualizadaEm")


def boletins(store):
    numero = UniqueIndex(store, "boletim:numero", "Número do boletim já existe")
    return Resource(store, "boletim", ["numeroBoletim"], "Boletim não encontrado",
                    unique={"numeroBoletim": numero})


def public_officer(policial):
    out = {k: policial[k] for k in ("id", "nome", "posto", "matricula")}
    for k in ("distrito", "esquadra"):
        if policial.get(k):
            out[k] = policial[k]
    return out


def body():
    return request.get_json(silent=True) or {}


# ---------- AUTH ----------
@api.post("/auth/signup")
@handle_errors("Erro interno do servidor")
def signup():
    data = parse_body(SignupRequest, body(), "Todos os campos são obrigatórios")
    store = KVStore()

    if matricula_index(store).lookup(data["matricula"]) is not None:
        raise Conflict("Matrícula já cadastrada")

    officer_id = str(uuid.uuid4())
    create_credentials(store, officer_id, data["email"], data.pop("password"))
    policial = policiais(store).create(data, record_id=officer_id)

    log_action(store, officer_id, c.POLICIAL_CRIADO,
               f"Novo policial: {policial['nome']} - {policial['posto']} - {policial['matricula']}")
    return jsonify({"message": "Policial cadastrado com sucesso", "policial": public_officer(policial)})


@api.post("/auth/login")
@handle_errors("Erro interno do servidor")
def login():
    data = parse_body(LoginRequest, body(), "Matrícula e senha são obrigatórios")
    store = KVStore()

    officer_id = matricula_index(store).lookup(data["matricula"].upper())
    if not officer_id:
        raise NotFound("Matrícula não encontrada")
    policial = policiais(store).get(officer_id)

    if not check_credentials(store, officer_id, data["password"]):
        logger.info("Login rejected for %s", policial["matricula"])
        raise AuthError("Credenciais inválidas")

    log_action(store, officer_id, c.LOGIN, f"Login realizado: {policial['nome']}")
    return jsonify({
        "message": "Login realizado com sucesso",
        "access_token": issue_token(policial),
        "policial": public_officer(policial),
    })


# ---------- BOLETINS ----------
@api.get("/boletins")
@auth_required
@handle_errors("Erro ao buscar boletins")
def list_boletins():
    store = KVStore()
    result = boletins(store).list()
    log_action(store, current_officer_id(), c.CONSULTA_BOLETINS, "Listagem de boletins")
    return jsonify({"boletins": result})


@api.post("/boletins")
@auth_required
@handle_errors("Erro ao criar boletim")
def create_boletim():
    data = parse_body(BoletimCreate, body(), "Campos obrigatórios não preenchidos")
    store = KVStore()
    officer_id = current_officer_id()

    data["policialId"] = officer_id
    data["status"] = c.STATUS_INICIAL
    boletim = boletins(store).create(data, stamp_updated=True)

    log_action(store, officer_id, c.BOLETIM_CRIADO,
               f"B.O. {boletim['numeroBoletim']} - {boletim['tipoOcorrencia']}")
    return jsonify({"message": "Boletim criado com sucesso", "boletim": boletim})


@api.post("/boletins/buscar")
@auth_required
@handle_errors("Erro na busca de boletins")
def search_boletins():
    raw = body()
    filtros = parse_body(BuscaFiltros, raw, "Filtros inválidos")
    store = KVStore()
    result = boletins(store).list()

    if filtros.get("numeroBoletim"):
        needle = filtros["numeroBoletim"].lower()
        result = [b for b in result if needle in b["numeroBoletim"].lower()]
    if filtros.get("tipoOcorrencia"):
        result = [b for b in result if b.get("tipoOcorrencia") == filtros["tipoOcorrencia"]]
    if filtros.get("status"):
        result = [b for b in result if b.get("status") == filtros["status"]]
    if filtros.get("dataInicio") and filtros.get("dataFim"):
        try:
            inicio = parse_iso(filtros["dataInicio"])
            fim = parse_iso(filtros["dataFim"])
        except ValueError:
            raise ValidationError("Data inválida nos filtros")
        result = [b for b in result if _occurred_between(b, inicio, fim)]

    log_action(store, current_officer_id(), c.BUSCA_AVANCADA,
               f"Busca com filtros: {json.dumps(raw, ensure_ascii=False, sort_keys=True)}")
    return jsonify({"boletins": result, "total": len(result)})


def _occurred_between(boletim, inicio, fim):
    try:
        quando = parse_iso(boletim.get("dataHoraOcorrencia") or "")
    except ValueError:
        return False
    return inicio <= quando <= fim


@api.get("/boletins/<boletim_id>")
@auth_required
@handle_errors("Erro ao buscar boletim")
def get_boletim(boletim_id):
    store = KVStore()
    boletim = boletins(store).get(boletim_id)
    log_action(store, current_officer_id(), c.CONSULTA_BOLETIM, f"B.O. {boletim['numeroBoletim']}")
    return jsonify({"boletim": boletim})


@api.put("/boletins/<boletim_id>")
@auth_required
@handle_errors("Erro ao atualizar boletim")
def update_boletim(boletim_id):
    changes = parse_body(BoletimUpdate, body(), "Campos obrigatórios não preenchidos", partial=True)
    store = KVStore()
    resource = boletins(store)
    numero = resource.get(boletim_id)["numeroBoletim"]
    boletim = resource.update(boletim_id, changes)
    log_action(store, current_officer_id(), c.BOLETIM_ATUALIZADO, f"B.O. {numero} atualizado")
    return jsonify({"message": "Boletim atualizado com sucesso", "boletim": boletim})


# ---------- PESSOAS ----------
@api.get("/pessoas")
@auth_required
@handle_errors("Erro ao buscar pessoas")
def list_pessoas():
    store = KVStore()
    result = pessoas(store).list()
    log_action(store, current_officer_id(), c.CONSULTA_PESSOAS, "Listagem de pessoas")
    return jsonify({"pessoas": result})


@api.post("/pessoas")
@auth_required
@handle_errors("Erro ao cadastrar pessoa")
def create_pessoa():
    data = parse_body(PessoaCreate, body(), "Nome e tipo são obrigatórios")
    store = KVStore()
    pessoa = pessoas(store).create(data)
    log_action(store, current_officer_id(), c.PESSOA_CRIADA, f"{pessoa['nome']} - {pessoa['tipo']}")
    return jsonify({"message": "Pessoa cadastrada com sucesso", "pessoa": pessoa})


@api.get("/pessoas/<pessoa_id>")
@auth_required
@handle_errors("Erro ao buscar pessoa")
def get_pessoa(pessoa_id):
    store = KVStore()
    pessoa = pessoas(store).get(pessoa_id)
    log_action(store, current_officer_id(), c.CONSULTA_PESSOA, pessoa["nome"])
    return jsonify({"pessoa": pessoa})


@api.put("/pessoas/<pessoa_id>")
@auth_required
@handle_errors("Erro ao atualizar pessoa")
def update_pessoa(pessoa_id):
    changes = parse_body(PessoaUpdate, body(), "Nome e tipo são obrigatórios", partial=True)
    store = KVStore()
    resource = pessoas(store)
    nome = resource.get(pessoa_id)["nome"]
    pessoa = resource.update(pessoa_id, changes)
    log_action(store, current_officer_id(), c.PESSOA_ATUALIZADA, f"{nome} atualizado")
    return jsonify({"message": "Pessoa atualizada com sucesso", "pessoa": pessoa})


@api.delete("/pessoas/<pessoa_id>")
@auth_required
@handle_errors("Erro ao deletar pessoa")
def delete_pessoa(pessoa_id):
    store = KVStore()
    pessoa = pessoas(store).delete(pessoa_id)
    log_action(store, current_officer_id(), c.PESSOA_DELETADA, f"{pessoa['nome']} removido do sistema")
    return jsonify({"message": "Pessoa deletada com sucesso"})


# ---------- POLICIAIS ----------
@api.get("/policiais")
@auth_required
@handle_errors("Erro ao buscar policiais")
def list_policiais():
    store = KVStore()
    result = policiais(store).list()
    log_action(store, current_officer_id(), c.CONSULTA_POLICIAIS, "Listagem de policiais")
    return jsonify({"policiais": result})


# ---------- RELATÓRIOS ----------
@api.get("/relatorios/estatisticas")
@auth_required
@handle_errors("Erro ao gerar estatísticas")
def estatisticas():
    store = KVStore()
    stats = {"totalBoletins": 0, "porTipo": {}, "porStatus": {}, "ultimosDias": {}}

    for b in boletins(store).list():
        stats["totalBoletins"] += 1
        tipo = b.get("tipoOcorrencia") or "outros"
        stats["porTipo"][tipo] = stats["porTipo"].get(tipo, 0) + 1
        status = b.get("status") or c.STATUS_INICIAL
        stats["porStatus"][status] = stats["porStatus"].get(status, 0) + 1
        if b.get("dataHoraOcorrencia"):
            try:
                dia = parse_iso(b["dataHoraOcorrencia"]).date().isoformat()
            except ValueError:
                continue
            stats["ultimosDias"][dia] = stats["ultimosDias"].get(dia, 0) + 1

    log_action(store, current_officer_id(), c.CONSULTA_ESTATISTICAS, "Relatório de estatísticas gerado")
    return jsonify({"estatisticas": stats})


# ---------- LOGS ----------
@api.get("/logs")
@auth_required
@handle_errors("Erro ao buscar logs")
def logs():
    store = KVStore()
    result = recent_logs(store, c.LOG_LIMIT)
    log_action(store, current_officer_id(), c.CONSULTA_LOGS, "Consulta de logs de auditoria")
    return jsonify({"logs": result})


@api.get("/health")
def health():
    return jsonify({
        "status": "OK",
        "timestamp": now_iso(),
        "version": current_app.config.get("APP_VERSION", "1.0.0"),
    })
