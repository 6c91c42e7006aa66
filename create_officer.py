from app import create_app
from constants import POSTOS

app = create_app()

with app.test_client() as client:
    nome = input("Nome completo: ")
    email = input("Email: ")
    matricula = input("Matrícula (PN000000): ")
    password = input("Palavra-passe: ")

    # posto select
    print("Selecione o posto:")
    for i, posto in enumerate(POSTOS, start=1):
        print(f"{i}. {posto}")
    choice = input(f"Número do posto (1-{len(POSTOS)}): ")

    try:
        posto = POSTOS[int(choice) - 1]
    except (ValueError, IndexError):
        posto = POSTOS[0]  # default Agente

    resp = client.post(f"{app.config['API_PREFIX']}/auth/signup", json={
        "nome": nome, "email": email, "matricula": matricula, "password": password, "posto": posto,
    })
    data = resp.get_json() or {}
    if resp.status_code == 200:
        p = data["policial"]
        print(f"✅ {p['posto']} {p['nome']} cadastrado com sucesso: {p['matricula']}")
    else:
        print(f"❌ {data.get('error', resp.status_code)}")
