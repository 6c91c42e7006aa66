# Postos da Polícia Nacional, do mais baixo para o mais alto
POSTOS = [
    "Agente",
    "Agente Principal",
    "Aspirante",
    "Subcomissário",
    "Comissário",
    "Comandante",
    "Subintendente",
    "Intendente",
    "Superintendente",
]

TIPOS_OCORRENCIA = [
    "Roubo à Mão Armada",
    "Roubo por Esticão",
    "Furto de Veículo",
    "Furto Simples",
    "Agressão Física",
    "Violência Doméstica",
    "Homicídio",
    "Tentativa de Homicídio",
    "Lesão Corporal",
    "Ameaça",
    "Tráfico de Drogas",
    "Vandalismo",
    "Burla",
    "Sequestro",
    "Perturbação da Ordem Pública",
    "Outros",
]

STATUS_BOLETIM = ["registrado", "em_andamento", "resolvido", "arquivado"]
STATUS_INICIAL = "registrado"

TIPOS_PESSOA = ["declarante", "vitima", "suspeito", "testemunha"]
STATUS_PESSOA = ["ativo", "procurado", "detido"]
NIVEIS_PERICULOSIDADE = ["baixo", "medio", "alto"]

MATRICULA_PATTERN = r"^PN\d{6}$"
BILHETE_PATTERN = r"^\d{9}[A-Z]{2}\d{3}$"

# audit action codes
POLICIAL_CRIADO = "POLICIAL_CRIADO"
LOGIN = "LOGIN"
CONSULTA_BOLETINS = "CONSULTA_BOLETINS"
BOLETIM_CRIADO = "BOLETIM_CRIADO"
CONSULTA_BOLETIM = "CONSULTA_BOLETIM"
BOLETIM_ATUALIZADO = "BOLETIM_ATUALIZADO"
BUSCA_AVANCADA = "BUSCA_AVANCADA"
CONSULTA_PESSOAS = "CONSULTA_PESSOAS"
CONSULTA_PESSOA = "CONSULTA_PESSOA"
PESSOA_CRIADA = "PESSOA_CRIADA"
PESSOA_ATUALIZADA = "PESSOA_ATUALIZADA"
PESSOA_DELETADA = "PESSOA_DELETADA"
CONSULTA_POLICIAIS = "CONSULTA_POLICIAIS"
CONSULTA_ESTATISTICAS = "CONSULTA_ESTATISTICAS"
CONSULTA_LOGS = "CONSULTA_LOGS"

LOG_LIMIT = 100
