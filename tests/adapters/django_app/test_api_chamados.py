"""
Testes da API JSON de chamados.

Testa:
- Abertura, consulta, listagem com filtros e atualização
- Ações de status, atribuição, encerramento e observações
- Mapeamento de erros de domínio para HTTP
"""

import pytest


pytestmark = pytest.mark.django_db


@pytest.fixture
def abrir(api, cliente_api):
    def _abrir(**kwargs):
        dados = {
            'titulo': 'Falha na rede',
            'prioridade': 'ALTA',
            'cliente_id': cliente_api['id'],
        }
        dados.update(kwargs)
        response = api.post('/api/tickets/', dados)
        assert response.status_code == 201, response.json()
        return response.json()
    return _abrir


class TestAbrirChamado:

    def test_abrir(self, api, cliente_api):
        response = api.post('/api/tickets/', {
            'titulo': 'Falha na rede',
            'prioridade': 'ALTA',
            'cliente_id': cliente_api['id'],
        })

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'ABERTO'
        assert body['prioridade'] == 'ALTA'
        assert body['nome_cliente'] == 'João Silva'
        assert body['tecnico_id'] is None
        assert body['encerrado_em'] is None
        assert response['Location'].endswith(f"/api/tickets/{body['id']}/")

    def test_abrir_com_tecnico(self, abrir, tecnico_api):
        body = abrir(tecnico_id=tecnico_api['id'], observacoes='Sala 12')

        assert body['status'] == 'EM_ANDAMENTO'
        assert body['nome_tecnico'] == 'Carlos Técnico'
        assert body['observacoes'] == 'Sala 12'

    def test_campos_obrigatorios(self, api, db):
        response = api.post('/api/tickets/', {})

        assert response.status_code == 400
        assert set(response.json()['errors']) == {'titulo', 'prioridade', 'cliente_id'}

    def test_prioridade_invalida(self, api, cliente_api):
        response = api.post('/api/tickets/', {
            'titulo': 'Falha na rede',
            'prioridade': 'URGENTE',
            'cliente_id': cliente_api['id'],
        })

        assert response.status_code == 400
        assert 'prioridade' in response.json()['errors']

    def test_cliente_inexistente(self, api, db):
        response = api.post('/api/tickets/', {
            'titulo': 'Falha na rede',
            'prioridade': 'ALTA',
            'cliente_id': 'nao-existe',
        })

        assert response.status_code == 404
        assert response.json()['message'] == 'Cliente não encontrado com id: nao-existe'


class TestConsultarChamado:

    def test_obter(self, api, abrir):
        chamado = abrir()

        response = api.get(f"/api/tickets/{chamado['id']}/")

        assert response.status_code == 200
        assert response.json() == chamado

    def test_obter_inexistente(self, api, db):
        response = api.get('/api/tickets/nao-existe/')

        assert response.status_code == 404
        assert response.json()['message'] == 'Chamado não encontrado com id: nao-existe'

    def test_listar_com_filtros(self, api, abrir, tecnico_api):
        abrir()
        abrir(prioridade='BAIXA', titulo='Troca de teclado')
        abrir(tecnico_id=tecnico_api['id'], titulo='Servidor lento')

        assert len(api.get('/api/tickets/').json()) == 3
        assert len(api.get('/api/tickets/', {'status': 'ABERTO'}).json()) == 2
        assert len(api.get('/api/tickets/', {'priority': 'alta'}).json()) == 2

        filtrados = api.get('/api/tickets/', {'status': 'EM_ANDAMENTO', 'prioridade': 'ALTA'}).json()
        assert [c['titulo'] for c in filtrados] == ['Servidor lento']

    def test_listar_filtro_invalido(self, api, db):
        response = api.get('/api/tickets/', {'status': 'RESOLVIDO'})

        assert response.status_code == 400
        assert 'status' in response.json()['errors']


class TestAtualizarChamado:

    def test_atualizar(self, api, abrir, cliente_api, tecnico_api):
        chamado = abrir()

        response = api.put(f"/api/tickets/{chamado['id']}/", {
            'titulo': 'Falha na rede do 2º andar',
            'prioridade': 'MEDIA',
            'cliente_id': cliente_api['id'],
            'tecnico_id': tecnico_api['id'],
            'observacoes': 'Switch reiniciado',
        })

        assert response.status_code == 200
        body = response.json()
        assert body['titulo'] == 'Falha na rede do 2º andar'
        assert body['status'] == 'EM_ANDAMENTO'
        assert body['nome_tecnico'] == 'Carlos Técnico'

    def test_atualizar_sem_tecnico_desvincula(self, api, abrir, cliente_api, tecnico_api):
        chamado = abrir(tecnico_id=tecnico_api['id'])

        body = api.put(f"/api/tickets/{chamado['id']}/", {
            'titulo': chamado['titulo'],
            'prioridade': chamado['prioridade'],
            'cliente_id': cliente_api['id'],
        }).json()

        assert body['tecnico_id'] is None
        assert body['status'] == 'EM_ANDAMENTO'

    def test_observacoes(self, api, abrir):
        chamado = abrir()

        response = api.put(f"/api/tickets/{chamado['id']}/notes/", {'observacoes': 'Cabo trocado'})

        assert response.status_code == 200
        assert response.json()['observacoes'] == 'Cabo trocado'

    def test_observacoes_longas(self, api, abrir):
        chamado = abrir()

        response = api.put(f"/api/tickets/{chamado['id']}/notes/", {'observacoes': 'x' * 501})

        assert response.status_code == 400


class TestCicloDeVida:

    def test_atribuir_e_encerrar(self, api, abrir, tecnico_api):
        chamado = abrir()

        atribuido = api.patch(f"/api/tickets/{chamado['id']}/assign/", {'tecnico_id': tecnico_api['id']})
        assert atribuido.status_code == 200
        assert atribuido.json()['status'] == 'EM_ANDAMENTO'

        encerrado = api.patch(f"/api/tickets/{chamado['id']}/close/")
        assert encerrado.status_code == 200
        assert encerrado.json()['status'] == 'ENCERRADO'
        assert encerrado.json()['encerrado_em'] is not None

        de_novo = api.patch(f"/api/tickets/{chamado['id']}/close/")
        assert de_novo.status_code == 400
        assert de_novo.json()['error'] == 'Business Rule Violation'

    def test_encerrar_aberto(self, api, abrir):
        chamado = abrir()

        response = api.patch(f"/api/tickets/{chamado['id']}/close/")

        assert response.status_code == 400
        assert response.json()['message'] == 'Chamado ABERTO não pode ser encerrado diretamente'

    def test_alterar_status(self, api, abrir):
        chamado = abrir()
        url = f"/api/tickets/{chamado['id']}/status/"

        assert api.patch(url, {'status': 'EM_ANDAMENTO'}).json()['status'] == 'EM_ANDAMENTO'
        assert api.patch(url, {'status': 'pausado'}).json()['status'] == 'PAUSADO'

        response = api.patch(url, {'status': 'CANCELADO'})
        assert response.status_code == 400
        assert response.json()['message'] == 'Chamado PAUSADO só pode voltar para EM_ANDAMENTO'

    def test_status_invalido(self, api, abrir):
        chamado = abrir()

        response = api.patch(f"/api/tickets/{chamado['id']}/status/", {'status': 'RESOLVIDO'})

        assert response.status_code == 400
        assert 'status' in response.json()['errors']

    def test_atribuir_tecnico_inexistente(self, api, abrir):
        chamado = abrir()

        response = api.patch(f"/api/tickets/{chamado['id']}/assign/", {'tecnico_id': 'nao-existe'})

        assert response.status_code == 404

    def test_metodo_nao_permitido(self, api, abrir):
        chamado = abrir()

        assert api.delete(f"/api/tickets/{chamado['id']}/").status_code == 405
