# Demo records used when the API cannot be reached

# Local credential list shipped with the client; `senha` is plaintext here
POLICIAIS_AUTORIZADOS = [
    {"id": "1", "nome": "Comandante João Silva Muana", "posto": "Comandante", "matricula": "PN001234", "senha": "pn2024"},
    {"id": "2", "nome": "Subcomissário Maria Santos Capita", "posto": "Subcomissário", "matricula": "PN002345", "senha": "pn2024"},
    {"id": "3", "nome": "Aspirante Carlos Eduardo Miguel", "posto": "Aspirante", "matricula": "PN003456", "senha": "pn2024"},
    {"id": "4", "nome": "Agente Ana Paula Francisco", "posto": "Agente", "matricula": "PN004567", "senha": "pn2024"},
    {"id": "5", "nome": "Agente Principal António Sebastião", "posto": "Agente Principal", "matricula": "PN005678", "senha": "pn2024"},
]

PESSOAS = [
    {
        "id": "1", "nome": "Roberto Silva Muana", "tipo": "declarante", "bilheteIdentidade": "005485692LA042",
        "telefone": "+244 923 456 789", "distrito": "Maianga", "bairro": "Alvalade", "municipio": "Luanda",
        "coordenadas": {"latitude": -8.8200, "longitude": 13.2300}, "status": "ativo",
    },
    {
        "id": "2", "nome": "Maria dos Santos Capita", "tipo": "vitima", "bilheteIdentidade": "006789123LA043",
        "telefone": "+244 924 567 890", "distrito": "Rangel", "bairro": "Coqueiros", "municipio": "Luanda",
        "coordenadas": {"latitude": -8.8350, "longitude": 13.2600}, "status": "ativo",
    },
    {
        "id": "3", "nome": "José Manuel Sebastião", "codinome": "Zé do Mercado", "tipo": "suspeito",
        "bilheteIdentidade": "007123456LA044", "distrito": "Sambizanga", "bairro": "Operário", "municipio": "Luanda",
        "coordenadas": {"latitude": -8.8100, "longitude": 13.2100}, "foto": "/fotos/suspeito_jose_manuel.jpg",
        "status": "procurado", "nivelPericulosidade": "alto", "crimesRelacionados": ["1", "3"],
    },
    {
        "id": "4", "nome": "Pedro António Oliveira", "tipo": "testemunha", "bilheteIdentidade": "008456789LA045",
        "distrito": "Ingombota", "bairro": "Baixa", "municipio": "Luanda",
        "coordenadas": {"latitude": -8.8118, "longitude": 13.2441}, "status": "ativo",
    },
    {
        "id": "5", "nome": "Carlos Alberto Kicombo", "codinome": "Kikas", "tipo": "suspeito",
        "bilheteIdentidade": "009876543LA046", "distrito": "Kilamba Kiaxi", "bairro": "Kilamba", "municipio": "Luanda",
        "coordenadas": {"latitude": -8.9200, "longitude": 13.1800}, "foto": "/fotos/suspeito_carlos_kicombo.jpg",
        "status": "procurado", "nivelPericulosidade": "medio", "crimesRelacionados": ["2", "4"],
    },
]

BOLETINS = [
    {
        "id": "1", "numeroBoletim": "BO-LDA-2025-001", "dataHoraOcorrencia": "2025-08-03T14:30:00",
        "tipoOcorrencia": "Roubo à Mão Armada", "local": "Avenida 4 de Fevereiro, nº 123 - Ingombota, Luanda",
        "descricao": "Vítima abordada por dois indivíduos armados que fugiram em motocicleta vermelha.",
        "declaranteId": "1", "policialId": "1",
        "envolvidos": [{"pessoaId": "2", "papel": "vitima"}, {"pessoaId": "3", "papel": "suspeito"}],
        "status": "registrado", "distrito": "Ingombota", "correlacionado": True, "crimesRelacionados": ["3"],
    },
    {
        "id": "2", "numeroBoletim": "BO-LDA-2025-002", "dataHoraOcorrencia": "2025-08-03T10:15:00",
        "tipoOcorrencia": "Furto de Veículo", "local": "Rua da Missão, Bairro Maianga - Luanda",
        "descricao": "Viatura Toyota Corolla desaparecida em frente à residência.",
        "declaranteId": "1", "policialId": "2",
        "envolvidos": [{"pessoaId": "1", "papel": "vitima"}, {"pessoaId": "5", "papel": "suspeito"}],
        "status": "em_andamento", "distrito": "Maianga", "correlacionado": False,
    },
    {
        "id": "3", "numeroBoletim": "BO-LDA-2025-003", "dataHoraOcorrencia": "2025-08-02T19:45:00",
        "tipoOcorrencia": "Roubo à Mão Armada", "local": "Rua dos Operários, Bairro Sambizanga - Luanda",
        "descricao": "Assalto a loja por dois indivíduos armados. Modus operandi similar a outros casos.",
        "declaranteId": "4", "policialId": "4",
        "envolvidos": [{"pessoaId": "3", "papel": "suspeito"}],
        "status": "em_andamento", "distrito": "Sambizanga", "correlacionado": True, "crimesRelacionados": ["1"],
    },
    {
        "id": "4", "numeroBoletim": "BO-LDA-2025-004", "dataHoraOcorrencia": "2025-08-01T16:20:00",
        "tipoOcorrencia": "Furto Simples", "local": "Shopping Kilamba, Kilamba Kiaxi - Luanda",
        "descricao": "Furto de bolsa em centro comercial, suspeito identificado pelas câmaras.",
        "declaranteId": "2", "policialId": "5",
        "envolvidos": [{"pessoaId": "5", "papel": "suspeito"}],
        "status": "resolvido", "distrito": "Kilamba Kiaxi", "correlacionado": True, "crimesRelacionados": ["2"],
    },
]

CORRELACOES = [
    {
        "id": "1", "suspeitos": ["3"], "boletins": ["1", "3"],
        "padraoIdentificado": "Roubos à mão armada com motocicleta, sempre em dupla, horário comercial",
        "confianca": 95, "criadoEm": "2025-08-03T16:00:00", "status": "ativo",
    },
    {
        "id": "2", "suspeitos": ["5"], "boletins": ["2", "4"],
        "padraoIdentificado": "Furtos em locais movimentados, aproveitando multidões",
        "confianca": 87, "criadoEm": "2025-08-02T11:00:00", "status": "ativo",
    },
]

PADROES = [
    {"id": "1", "tipo": "temporal", "confianca": 92,
     "descricao": "Aumento de 300% em roubos à mão armada entre 14h-18h nos últimos 3 dias",
     "dadosRelacionados": {"horario": "14:00-18:00", "periodo": "3 dias"}},
    {"id": "2", "tipo": "geografico", "confianca": 88,
     "descricao": "Cluster de crimes em raio de 2km entre Ingombota e Maianga",
     "dadosRelacionados": {"distritos": ["Ingombota", "Maianga"], "raio": "2km"}},
    {"id": "3", "tipo": "metodologico", "confianca": 95,
     "descricao": "Padrão similar: dupla em motocicleta, mesmas rotas de fuga",
     "dadosRelacionados": {"metodo": "motocicleta", "participantes": 2}},
    {"id": "4", "tipo": "suspeito", "confianca": 85,
     "descricao": 'Suspeito "José Manuel" presente em 80% dos crimes recentes da região',
     "dadosRelacionados": {"suspeito": "José Manuel Sebastião", "presenca": "80%"}},
]

MOCK_RESPONSES = {
    "/auth/login": {
        "access_token": "demo-token-12345",
        "policial": {"id": "1", "nome": "Comandante João Silva Muana", "posto": "Comandante", "matricula": "PN001234"},
    },
    "/boletins": {"boletins": []},
    "/pessoas": {"pessoas": [{k: p[k] for k in ("id", "nome", "tipo", "bilheteIdentidade")} for p in PESSOAS[:2]]},
    "/policiais": {"policiais": [{k: v for k, v in p.items() if k != "senha"} for p in POLICIAIS_AUTORIZADOS[:1]]},
    "/relatorios/estatisticas": {
        "estatisticas": {"totalBoletins": 0, "porTipo": {}, "porStatus": {}, "ultimosDias": {}},
    },
}
