"""
Pydantic request schemas for the B.O. Digital API.

Bodies are validated here before they reach the store; unknown fields are
dropped so nothing but declared attributes is ever persisted.
"""

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from constants import (
    BILHETE_PATTERN,
    MATRICULA_PATTERN,
    NIVEIS_PERICULOSIDADE,
    POSTOS,
    STATUS_BOLETIM,
    STATUS_PESSOA,
    TIPOS_OCORRENCIA,
    TIPOS_PESSOA,
)
from utils.errors import ValidationError

TipoPessoa = Literal[tuple(TIPOS_PESSOA)]
StatusPessoa = Literal[tuple(STATUS_PESSOA)]
NivelPericulosidade = Literal[tuple(NIVEIS_PERICULOSIDADE)]
StatusBoletim = Literal[tuple(STATUS_BOLETIM)]

MISSING_ERRORS = {"missing", "string_too_short"}


class Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class CredentialSchema(Schema):
    """Passwords are taken exactly as typed; every other string is stripped."""
    model_config = ConfigDict(str_strip_whitespace=False)

    @field_validator("*", mode="before")
    @classmethod
    def strip_except_password(cls, v, info):
        if isinstance(v, str) and info.field_name != "password":
            return v.strip()
        return v


class Coordenadas(Schema):
    latitude: float
    longitude: float


class Envolvido(Schema):
    pessoaId: str = Field(..., min_length=1)
    papel: str = Field(..., min_length=1)


# ---------- AUTH ----------

class SignupRequest(CredentialSchema):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    nome: str = Field(..., min_length=1)
    posto: str = Field(..., min_length=1)
    matricula: str = Field(..., min_length=1)
    distrito: Optional[str] = None
    esquadra: Optional[str] = None

    @field_validator("posto")
    @classmethod
    def validate_posto(cls, v: str) -> str:
        if v not in POSTOS:
            raise ValueError(f"Posto inválido: {v}")
        return v

    @field_validator("matricula")
    @classmethod
    def validate_matricula(cls, v: str) -> str:
        v = v.upper()
        if not re.match(MATRICULA_PATTERN, v):
            raise ValueError("Matrícula deve ter o formato PN000000")
        return v


class LoginRequest(CredentialSchema):
    matricula: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# ---------- PESSOAS ----------

class PessoaFields(Schema):
    codinome: Optional[str] = None
    bilheteIdentidade: Optional[str] = None
    telefone: Optional[str] = None
    foto: Optional[str] = None
    endereco: Optional[str] = None
    dataNascimento: Optional[str] = None
    coordenadas: Optional[Coordenadas] = None
    distrito: Optional[str] = None
    bairro: Optional[str] = None
    municipio: Optional[str] = None
    status: Optional[StatusPessoa] = None
    nivelPericulosidade: Optional[NivelPericulosidade] = None
    crimesRelacionados: Optional[List[str]] = None

    @field_validator("bilheteIdentidade")
    @classmethod
    def validate_bilhete(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not re.match(BILHETE_PATTERN, v):
            raise ValueError("Bilhete de identidade deve ter o formato 000000000LA000")
        return v


class PessoaCreate(PessoaFields):
    nome: str = Field(..., min_length=1)
    tipo: TipoPessoa


class PessoaUpdate(PessoaFields):
    nome: Optional[str] = Field(default=None, min_length=1)
    tipo: Optional[TipoPessoa] = None

    @field_validator("nome", "tipo")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("não pode ser nulo")
        return v


# ---------- BOLETINS ----------

class BoletimFields(Schema):
    dataHoraOcorrencia: Optional[str] = None
    declaranteId: Optional[str] = None
    coordenadas: Optional[Coordenadas] = None
    distrito: Optional[str] = None
    bairro: Optional[str] = None
    municipio: Optional[str] = None
    evidencias: Optional[List[str]] = None
    correlacionado: Optional[bool] = None
    crimesRelacionados: Optional[List[str]] = None

    @field_validator("tipoOcorrencia", check_fields=False)
    @classmethod
    def validate_tipo(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in TIPOS_OCORRENCIA:
            raise ValueError(f"Tipo de ocorrência inválido: {v}")
        return v


class BoletimCreate(BoletimFields):
    numeroBoletim: str = Field(..., min_length=1)
    tipoOcorrencia: str = Field(..., min_length=1)
    local: str = Field(..., min_length=1)
    descricao: str = Field(..., min_length=1)
    envolvidos: List[Envolvido] = Field(default_factory=list)


class BoletimUpdate(BoletimFields):
    numeroBoletim: Optional[str] = Field(default=None, min_length=1)
    tipoOcorrencia: Optional[str] = Field(default=None, min_length=1)
    local: Optional[str] = Field(default=None, min_length=1)
    descricao: Optional[str] = Field(default=None, min_length=1)
    envolvidos: Optional[List[Envolvido]] = None
    # no transition rules: any status may follow any other
    status: Optional[StatusBoletim] = None

    @field_validator("numeroBoletim", "tipoOcorrencia", "local", "descricao", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("não pode ser nulo")
        return v


class BuscaFiltros(Schema):
    numeroBoletim: Optional[str] = None
    tipoOcorrencia: Optional[str] = None
    status: Optional[str] = None
    dataInicio: Optional[str] = None
    dataFim: Optional[str] = None


def parse_body(schema, data, missing_message, partial=False):
    """Validate `data` against `schema` and return a plain dict.

    Missing or empty required fields raise `missing_message`; any other
    problem is reported with the first offending field.
    With `partial`, only fields actually sent are returned.
    """
    try:
        model = schema.model_validate(data if isinstance(data, dict) else {})
    except PydanticValidationError as e:
        errors = e.errors()
        if any(err["type"] in MISSING_ERRORS for err in errors):
            raise ValidationError(missing_message)
        first = errors[0]
        field = ".".join(str(p) for p in first["loc"])
        message = first["msg"].removeprefix("Value error, ")
        raise ValidationError(f"Campo inválido ({field}): {message}")
    return model.model_dump(exclude_unset=partial, exclude_none=not partial)
