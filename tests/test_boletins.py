def create(client, auth, payload):
    return client.post("/api/boletins", json=payload, headers=auth)


def test_create_boletim_defaults(client, auth, officer, boletim_payload):
    resp = create(client, auth, boletim_payload)
    assert resp.status_code == 200
    boletim = resp.get_json()["boletim"]
    assert boletim["status"] == "registrado"
    assert boletim["policialId"] == officer["id"]
    assert boletim["envolvidos"] == []
    assert boletim["criadoEm"] == boletim["atualizadoEm"]


def test_client_cannot_choose_initial_status(client, auth, boletim_payload):
    boletim = create(client, auth, dict(boletim_payload, status="resolvido")).get_json()["boletim"]
    assert boletim["status"] == "registrado"


def test_duplicate_numero_conflicts_and_keeps_original(client, auth, boletim_payload):
    original = create(client, auth, boletim_payload).get_json()["boletim"]

    resp = create(client, auth, dict(boletim_payload, local="Outro lugar"))
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "Número do boletim já existe"

    stored = client.get(f"/api/boletins/{original['id']}", headers=auth).get_json()["boletim"]
    assert stored == original
    assert len(client.get("/api/boletins", headers=auth).get_json()["boletins"]) == 1


def test_same_payload_with_new_numero_creates_two_records(client, auth, boletim_payload):
    a = create(client, auth, boletim_payload).get_json()["boletim"]
    b = create(client, auth, dict(boletim_payload, numeroBoletim="BO-2025-100")).get_json()["boletim"]
    assert a["id"] != b["id"]


def test_create_missing_fields(client, auth):
    resp = create(client, auth, {"numeroBoletim": "BO-1", "local": "Rua"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Campos obrigatórios não preenchidos"

    resp = create(client, auth, {"numeroBoletim": "BO-1", "tipoOcorrencia": "Furto Simples",
                                 "local": "   ", "descricao": "x"})
    assert resp.status_code == 400


def test_create_unknown_tipo(client, auth, boletim_payload):
    resp = create(client, auth, dict(boletim_payload, tipoOcorrencia="Pirataria Espacial"))
    assert resp.status_code == 400
    assert "Tipo de ocorrência inválido" in resp.get_json()["error"]


def test_list_excludes_index_values(client, auth, boletim_payload):
    create(client, auth, boletim_payload)
    boletins = client.get("/api/boletins", headers=auth).get_json()["boletins"]
    assert len(boletins) == 1
    assert all(isinstance(b, dict) and b["numeroBoletim"] for b in boletins)


def test_get_unknown_boletim(client, auth):
    resp = client.get("/api/boletins/does-not-exist", headers=auth)
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Boletim não encontrado"


def test_partial_update_preserves_other_fields(client, auth, boletim_payload):
    original = create(client, auth, boletim_payload).get_json()["boletim"]

    resp = client.put(f"/api/boletins/{original['id']}", json={"status": "em_andamento"}, headers=auth)
    assert resp.status_code == 200
    updated = resp.get_json()["boletim"]

    assert updated["status"] == "em_andamento"
    for field in ("numeroBoletim", "tipoOcorrencia", "local", "descricao", "declaranteId", "criadoEm"):
        assert updated[field] == original[field]
    assert updated["atualizadoEm"] >= original["atualizadoEm"]


def test_any_status_may_follow_any_other(client, auth, boletim_payload):
    original = create(client, auth, boletim_payload).get_json()["boletim"]
    for status in ("arquivado", "registrado", "resolvido", "em_andamento"):
        resp = client.put(f"/api/boletins/{original['id']}", json={"status": status}, headers=auth)
        assert resp.get_json()["boletim"]["status"] == status


def test_update_rejects_unknown_status_and_nulls(client, auth, boletim_payload):
    original = create(client, auth, boletim_payload).get_json()["boletim"]
    assert client.put(f"/api/boletins/{original['id']}", json={"status": "perdido"}, headers=auth).status_code == 400
    assert client.put(f"/api/boletins/{original['id']}", json={"local": None}, headers=auth).status_code == 400


def test_update_unknown_boletim(client, auth):
    resp = client.put("/api/boletins/nope", json={"status": "resolvido"}, headers=auth)
    assert resp.status_code == 404


def test_renumbering_moves_the_index(client, auth, boletim_payload):
    first = create(client, auth, boletim_payload).get_json()["boletim"]
    second = create(client, auth, dict(boletim_payload, numeroBoletim="BO-2025-100")).get_json()["boletim"]

    resp = client.put(f"/api/boletins/{second['id']}", json={"numeroBoletim": "BO-2025-099"}, headers=auth)
    assert resp.status_code == 409

    resp = client.put(f"/api/boletins/{first['id']}", json={"numeroBoletim": "BO-2025-101"}, headers=auth)
    assert resp.status_code == 200
    # the old number is free again
    assert create(client, auth, boletim_payload).status_code == 200


def test_search_filters(client, auth, boletim_payload):
    create(client, auth, boletim_payload)
    create(client, auth, dict(boletim_payload, numeroBoletim="BO-LDA-2025-001", tipoOcorrencia="Burla",
                              dataHoraOcorrencia="2025-07-01T10:00:00"))

    def search(filtros):
        resp = client.post("/api/boletins/buscar", json=filtros, headers=auth)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["total"] == len(data["boletins"])
        return [b["numeroBoletim"] for b in data["boletins"]]

    assert sorted(search({})) == ["BO-2025-099", "BO-LDA-2025-001"]
    assert search({"numeroBoletim": "lda"}) == ["BO-LDA-2025-001"]
    assert search({"tipoOcorrencia": "Furto Simples"}) == ["BO-2025-099"]
    assert search({"status": "resolvido"}) == []
    assert search({"dataInicio": "2025-08-01", "dataFim": "2025-08-31"}) == ["BO-2025-099"]
    # a single bound is ignored
    assert len(search({"dataInicio": "2025-08-01"})) == 2


def test_search_bad_date(client, auth, boletim_payload):
    create(client, auth, boletim_payload)
    resp = client.post("/api/boletins/buscar", json={"dataInicio": "ontem", "dataFim": "hoje"}, headers=auth)
    assert resp.status_code == 400


def test_utc_z_timestamps_are_understood(client, auth, boletim_payload):
    create(client, auth, dict(boletim_payload, dataHoraOcorrencia="2025-08-03T14:30:00.000Z"))

    resp = client.post("/api/boletins/buscar", headers=auth,
                       json={"dataInicio": "2025-08-03T00:00:00Z", "dataFim": "2025-08-03T23:59:59Z"})
    assert resp.status_code == 200
    assert resp.get_json()["total"] == 1

    stats = client.get("/api/relatorios/estatisticas", headers=auth).get_json()["estatisticas"]
    assert stats["ultimosDias"] == {"2025-08-03": 1}
