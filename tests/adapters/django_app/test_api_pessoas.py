"""
Testes da API JSON de clientes e técnicos.

Testa:
- CRUD completo em /api/clients/ e /api/technicians/
- Formato das respostas de erro (400, 404, 409)
- Buscas por CPF e por e-mail
"""

import pytest

from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository


pytestmark = pytest.mark.django_db


class TestCriarPessoa:

    def test_criar_cliente(self, api):
        response = api.post('/api/clients/', {
            'nome': 'João Silva',
            'cpf': '123.456.789-01',
            'email': 'Joao@Email.com',
            'senha': '123456',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['tipo'] == 'CLIENTE'
        assert body['cpf'] == '12345678901'
        assert body['email'] == 'joao@email.com'
        assert body['perfis'] == ['CLIENTE']
        assert 'senha' not in body
        assert 'senha_hash' not in body
        assert response['Location'].endswith(f"/api/clients/{body['id']}/")

    def test_criar_tecnico_com_perfis(self, api):
        response = api.post('/api/technicians/', {
            'nome': 'Ana Suporte',
            'cpf': '55566677788',
            'email': 'ana@aethernet.com',
            'senha': '123456',
            'perfis': ['ROLE_ADMIN', 2],
        })

        assert response.status_code == 201
        assert response.json()['perfis'] == ['ADMIN', 'TECNICO']

    def test_campos_invalidos(self, api):
        response = api.post('/api/clients/', {
            'nome': 'Jo',
            'cpf': '123',
            'email': 'invalido',
        })

        assert response.status_code == 400
        body = response.json()
        assert body['status'] == 400
        assert body['error'] == 'Validation Failed'
        assert body['path'] == '/api/clients/'
        assert 'timestamp' in body
        assert set(body['errors']) == {'nome', 'email', 'senha'}

    def test_cpf_com_tamanho_errado(self, api):
        response = api.post('/api/clients/', {
            'nome': 'João Silva',
            'cpf': '123',
            'email': 'joao@email.com',
            'senha': '123456',
        })

        assert response.status_code == 400
        assert 'cpf' in response.json()['errors']

    def test_email_maior_que_a_coluna(self, api):
        response = api.post('/api/clients/', {
            'nome': 'João Silva',
            'cpf': '12345678901',
            'email': 'a' * 250 + '@email.com',
            'senha': '123456',
        })

        assert response.status_code == 400
        assert 'email' in response.json()['errors']

    def test_perfil_invalido(self, api):
        response = api.post('/api/clients/', {
            'nome': 'João Silva',
            'cpf': '12345678901',
            'email': 'joao@email.com',
            'senha': '123456',
            'perfis': ['GERENTE'],
        })

        assert response.status_code == 400
        assert 'perfis' in response.json()['errors']

    def test_json_invalido(self, api):
        response = api.post('/api/clients/', raw='{nome: ')

        assert response.status_code == 400
        assert 'body' in response.json()['errors']

    def test_cpf_duplicado(self, api, cliente_api):
        response = api.post('/api/technicians/', {
            'nome': 'Outro Técnico',
            'cpf': '12345678901',
            'email': 'outro@aethernet.com',
            'senha': '123456',
        })

        assert response.status_code == 409
        body = response.json()
        assert body['error'] == 'Conflict'
        assert body['message'] == 'CPF já cadastrado no sistema'

    def test_email_duplicado(self, api, cliente_api):
        response = api.post('/api/clients/', {
            'nome': 'Outro Cliente',
            'cpf': '00011122233',
            'email': 'JOAO@email.com',
            'senha': '123456',
        })

        assert response.status_code == 409
        assert response.json()['message'] == 'E-mail já cadastrado no sistema'

    def test_duplicado_detectado_so_pelo_banco(self, api, cliente_api, monkeypatch):
        monkeypatch.setattr(DjangoPessoaRepository, "exists_by_cpf", lambda self, cpf, excluir_id=None: False)
        monkeypatch.setattr(DjangoPessoaRepository, "exists_by_email", lambda self, email, excluir_id=None: False)

        response = api.post('/api/technicians/', {
            'nome': 'Outro Técnico',
            'cpf': '12345678901',
            'email': 'outro@aethernet.com',
            'senha': '123456',
        })

        assert response.status_code == 409
        assert response.json()['message'] == 'CPF já cadastrado no sistema'
        assert len(api.get('/api/technicians/').json()) == 0


class TestConsultarPessoa:

    def test_listar(self, api, cliente_api, tecnico_api):
        clientes = api.get('/api/clients/').json()
        tecnicos = api.get('/api/technicians/').json()

        assert [c['id'] for c in clientes] == [cliente_api['id']]
        assert [t['id'] for t in tecnicos] == [tecnico_api['id']]

    def test_obter(self, api, cliente_api):
        response = api.get(f"/api/clients/{cliente_api['id']}/")

        assert response.status_code == 200
        assert response.json()['nome'] == 'João Silva'

    def test_obter_inexistente(self, api):
        response = api.get('/api/clients/nao-existe/')

        assert response.status_code == 404
        body = response.json()
        assert body['error'] == 'Not Found'
        assert body['message'] == 'Cliente não encontrado com id: nao-existe'
        assert body['path'] == '/api/clients/nao-existe/'

    def test_cliente_nao_aparece_como_tecnico(self, api, cliente_api):
        response = api.get(f"/api/technicians/{cliente_api['id']}/")

        assert response.status_code == 404

    def test_buscar_por_cpf(self, api, cliente_api):
        response = api.get('/api/clients/cpf/12345678901/')

        assert response.status_code == 200
        assert response.json()['id'] == cliente_api['id']

    def test_buscar_por_email(self, api, tecnico_api):
        response = api.get('/api/technicians/email/carlos@aethernet.com/')

        assert response.status_code == 200
        assert response.json()['id'] == tecnico_api['id']

    def test_buscar_por_email_inexistente(self, api):
        assert api.get('/api/technicians/email/ninguem@aethernet.com/').status_code == 404


class TestAtualizarPessoa:

    def test_atualizar(self, api, cliente_api):
        response = api.put(f"/api/clients/{cliente_api['id']}/", {
            'nome': 'João da Silva',
            'cpf': '12345678901',
            'email': 'joao.silva@email.com',
        })

        assert response.status_code == 200
        body = response.json()
        assert body['nome'] == 'João da Silva'
        assert body['email'] == 'joao.silva@email.com'

    def test_atualizar_com_senha_curta(self, api, cliente_api):
        response = api.put(f"/api/clients/{cliente_api['id']}/", {
            'nome': 'João Silva',
            'cpf': '12345678901',
            'email': 'joao@email.com',
            'senha': '123',
        })

        assert response.status_code == 400
        assert 'senha' in response.json()['errors']

    def test_atualizar_para_cpf_existente(self, api, cliente_api, tecnico_api):
        response = api.put(f"/api/clients/{cliente_api['id']}/", {
            'nome': 'João Silva',
            'cpf': tecnico_api['cpf'],
            'email': 'joao@email.com',
        })

        assert response.status_code == 409

    def test_atualizar_inexistente(self, api):
        response = api.put('/api/technicians/nao-existe/', {
            'nome': 'Carlos Técnico',
            'cpf': '11122233344',
            'email': 'carlos@aethernet.com',
        })

        assert response.status_code == 404


class TestRemoverPessoa:

    def test_remover(self, api, cliente_api):
        response = api.delete(f"/api/clients/{cliente_api['id']}/")

        assert response.status_code == 204
        assert api.get(f"/api/clients/{cliente_api['id']}/").status_code == 404

    def test_remover_inexistente(self, api):
        assert api.delete('/api/clients/nao-existe/').status_code == 404

    def test_remover_com_chamados(self, api, cliente_api):
        api.post('/api/tickets/', {
            'titulo': 'Falha na rede',
            'prioridade': 'ALTA',
            'cliente_id': cliente_api['id'],
        })

        response = api.delete(f"/api/clients/{cliente_api['id']}/")

        assert response.status_code == 400
        assert response.json()['error'] == 'Business Rule Violation'
        assert api.get(f"/api/clients/{cliente_api['id']}/").status_code == 200
