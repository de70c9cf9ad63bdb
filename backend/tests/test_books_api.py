"""
Testes dos endpoints de Books.

Testa:
    - Criação (idexists, Location, headers de alerta)
    - Atualização (idnull, substituição completa, ID inexistente)
    - Listagens paginadas (headers X-Total-Count e Link)
    - Listagens filtradas por autor e editora
    - Busca e remoção por ID
    - Cenário completo criar/buscar/atualizar/remover
"""

import pytest
from httpx import AsyncClient

BOOKS_URL = "/api/books"


async def create_book(client: AsyncClient, **fields) -> dict:
    """Cria livro e retorna o corpo da resposta."""
    payload = {"title": "Livro de teste", **fields}
    response = await client.post(BOOKS_URL, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# ==========================================
# Test: Create
# ==========================================

class TestCreateBook:
    """Testes para POST /books."""

    @pytest.mark.anyio
    async def test_create_returns_201_with_generated_id(self, client: AsyncClient):
        """Livro sem id deve ser criado com id gerado pelo servidor."""
        response = await client.post(BOOKS_URL, json={"title": "Dune", "pages": 412})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["title"] == "Dune"
        assert data["pages"] == 412

    @pytest.mark.anyio
    async def test_create_sets_location_and_alert_headers(self, client: AsyncClient):
        """Criação deve apontar Location para o novo recurso e emitir alerta."""
        response = await client.post(BOOKS_URL, json={"title": "Dune"})

        assert response.headers["Location"] == "/api/books/1"
        assert response.headers["X-libraryApp-alert"] == "libraryApp.book.created"
        assert response.headers["X-libraryApp-params"] == "1"

    @pytest.mark.anyio
    async def test_create_ids_are_unique(self, client: AsyncClient):
        """Cada criação deve gerar um id ainda não usado."""
        ids = [(await create_book(client, title=f"Livro {i}"))["id"] for i in range(3)]

        assert len(set(ids)) == 3
        assert all(i is not None for i in ids)

    @pytest.mark.anyio
    async def test_create_with_id_fails_with_idexists(self, client: AsyncClient, book_store):
        """Livro com id deve falhar com idexists e não gravar nada."""
        response = await client.post(BOOKS_URL, json={"id": 7, "title": "Dune"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "error.idexists"
        assert data["error_key"] == "idexists"
        assert data["entity_name"] == "book"
        assert response.headers["X-libraryApp-error"] == "error.idexists"
        assert response.headers["X-libraryApp-params"] == "book"
        assert book_store.records == {}

    @pytest.mark.anyio
    async def test_create_invalid_payload_returns_422(self, client: AsyncClient, book_store):
        """Título vazio deve ser rejeitado pela validação."""
        response = await client.post(BOOKS_URL, json={"title": ""})

        assert response.status_code == 422
        assert book_store.records == {}

    @pytest.mark.anyio
    async def test_create_with_unknown_author_fails(self, client: AsyncClient, book_store):
        """Autor inexistente deve falhar com authornotfound e não gravar nada."""
        response = await client.post(BOOKS_URL, json={"title": "Dune", "author_id": 99})

        assert response.status_code == 400
        assert response.json()["error_key"] == "authornotfound"
        assert response.headers["X-libraryApp-error"] == "error.authornotfound"
        assert response.headers["X-libraryApp-params"] == "book"
        assert book_store.records == {}

    @pytest.mark.anyio
    async def test_create_with_unknown_publisher_fails(self, client: AsyncClient, author_store, book_store):
        """Editora inexistente deve falhar com publishernotfound."""
        await author_store.create(name="Frank Herbert")

        response = await client.post(
            BOOKS_URL,
            json={"title": "Dune", "author_id": 1, "publisher_id": 99},
        )

        assert response.status_code == 400
        assert response.json()["error_key"] == "publishernotfound"
        assert book_store.records == {}

    @pytest.mark.anyio
    async def test_create_future_publication_date_returns_422(self, client: AsyncClient):
        """Data de publicação no futuro deve ser rejeitada."""
        response = await client.post(
            BOOKS_URL,
            json={"title": "Dune", "publication_date": "2999-01-01"},
        )

        assert response.status_code == 422


# ==========================================
# Test: Update
# ==========================================

class TestUpdateBook:
    """Testes para PUT /books."""

    @pytest.mark.anyio
    async def test_update_without_id_fails_with_idnull(self, client: AsyncClient, book_store):
        """Atualização sem id deve falhar com idnull e não gravar nada."""
        await create_book(client, title="Dune")

        response = await client.put(BOOKS_URL, json={"title": "Dune (rev)"})

        assert response.status_code == 400
        assert response.json()["error_key"] == "idnull"
        assert book_store.records[1].title == "Dune"

    @pytest.mark.anyio
    async def test_update_round_trip(self, client: AsyncClient):
        """Atualização deve manter o id e devolver os campos alterados."""
        book = await create_book(client, title="Dune", pages=412)

        response = await client.put(
            BOOKS_URL,
            json={"id": book["id"], "title": "Dune Messiah", "pages": 256},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == book["id"]
        assert data["title"] == "Dune Messiah"
        assert data["pages"] == 256
        assert response.headers["X-libraryApp-alert"] == "libraryApp.book.updated"
        assert response.headers["X-libraryApp-params"] == str(book["id"])

    @pytest.mark.anyio
    async def test_update_replaces_whole_record(self, client: AsyncClient):
        """Campos omitidos no payload devem ser limpos."""
        book = await create_book(client, title="Dune", pages=412, isbn="978-0441013593")

        response = await client.put(BOOKS_URL, json={"id": book["id"], "title": "Dune"})

        data = response.json()
        assert data["pages"] is None
        assert data["isbn"] is None

    @pytest.mark.anyio
    async def test_update_unknown_id_returns_404(self, client: AsyncClient):
        """Atualização de id inexistente deve retornar 404."""
        response = await client.put(BOOKS_URL, json={"id": 999, "title": "Dune"})

        assert response.status_code == 404


# ==========================================
# Test: List
# ==========================================

class TestListBooks:
    """Testes para GET /books."""

    @pytest.mark.anyio
    async def test_list_returns_array_and_total_header(self, client: AsyncClient):
        """Corpo deve ser só a lista; total vai no header."""
        for i in range(3):
            await create_book(client, title=f"Livro {i}")

        response = await client.get(BOOKS_URL)

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert [b["title"] for b in data] == ["Livro 0", "Livro 1", "Livro 2"]
        assert response.headers["X-Total-Count"] == "3"

    @pytest.mark.anyio
    async def test_list_link_header_for_middle_page(self, client: AsyncClient):
        """Página intermediária deve ter next, prev, last e first."""
        for i in range(5):
            await create_book(client, title=f"Livro {i}")

        response = await client.get(BOOKS_URL, params={"page": 1, "size": 2})

        assert len(response.json()) == 2
        assert response.headers["Link"] == (
            '</api/books?page=2&size=2>; rel="next",'
            '</api/books?page=0&size=2>; rel="prev",'
            '</api/books?page=2&size=2>; rel="last",'
            '</api/books?page=0&size=2>; rel="first"'
        )

    @pytest.mark.anyio
    async def test_list_empty(self, client: AsyncClient):
        """Catálogo vazio deve retornar lista vazia e total 0."""
        response = await client.get(BOOKS_URL)

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.anyio
    async def test_list_size_above_max_returns_422(self, client: AsyncClient):
        """Tamanho de página acima do máximo deve ser rejeitado."""
        response = await client.get(BOOKS_URL, params={"size": 1000})

        assert response.status_code == 422

    @pytest.mark.anyio
    async def test_list_malformed_sort_returns_400(self, client: AsyncClient):
        """Direção de ordenação desconhecida deve retornar 400."""
        response = await client.get(BOOKS_URL, params={"sort": "title,sideways"})

        assert response.status_code == 400

    @pytest.mark.anyio
    async def test_list_unknown_sort_field_returns_sortinvalid(self, client: AsyncClient):
        """Campo de ordenação que não existe deve falhar com sortinvalid."""
        response = await client.get(BOOKS_URL, params={"sort": "popularity,desc"})

        assert response.status_code == 400
        assert response.json()["error"] == "error.sortinvalid"
        assert response.json()["entity_name"] == "book"
        assert response.headers["X-libraryApp-error"] == "error.sortinvalid"

    @pytest.mark.anyio
    async def test_list_sorted_by_field_desc(self, client: AsyncClient):
        """sort=campo,desc deve ordenar a página pelo campo."""
        for title, pages in [("Dune", 412), ("Earthsea", 183), ("Hyperion", 482)]:
            await create_book(client, title=title, pages=pages)

        response = await client.get(BOOKS_URL, params={"sort": "pages,desc"})

        assert [b["title"] for b in response.json()] == ["Hyperion", "Dune", "Earthsea"]


class TestListBooksByRelation:
    """Testes para GET /books/author/{id} e GET /books/publisher/{id}."""

    @pytest.mark.anyio
    async def test_list_by_author_filters(self, client: AsyncClient, author_store):
        """Só livros do autor devem ser retornados."""
        await author_store.create(name="Frank Herbert")
        await author_store.create(name="Ursula K. Le Guin")
        await create_book(client, title="Dune", author_id=1)
        await create_book(client, title="Earthsea", author_id=2)
        await create_book(client, title="Children of Dune", author_id=1)

        response = await client.get(f"{BOOKS_URL}/author/1")

        assert response.status_code == 200
        assert [b["title"] for b in response.json()] == ["Dune", "Children of Dune"]
        assert response.headers["X-Total-Count"] == "2"
        assert "/api/books/author/1?page=0" in response.headers["Link"]

    @pytest.mark.anyio
    async def test_list_by_unknown_author_returns_empty_page(self, client: AsyncClient, author_store):
        """Autor sem livros deve retornar página vazia, não erro."""
        await author_store.create(name="Frank Herbert")
        await create_book(client, title="Dune", author_id=1)

        response = await client.get(f"{BOOKS_URL}/author/42")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.anyio
    async def test_list_by_publisher_filters(self, client: AsyncClient, publisher_store):
        """Só livros da editora devem ser retornados."""
        await publisher_store.create(name="Chilton Books")
        await publisher_store.create(name="Ace Books")
        await create_book(client, title="Dune", publisher_id=1)
        await create_book(client, title="Earthsea", publisher_id=2)

        response = await client.get(f"{BOOKS_URL}/publisher/1")

        assert [b["title"] for b in response.json()] == ["Dune"]
        assert "/api/books/publisher/1?page=0" in response.headers["Link"]

    @pytest.mark.anyio
    async def test_list_by_unknown_publisher_returns_empty_page(self, client: AsyncClient):
        """Editora sem livros deve retornar página vazia, não erro."""
        response = await client.get(f"{BOOKS_URL}/publisher/42")

        assert response.status_code == 200
        assert response.json() == []


# ==========================================
# Test: Get / Delete
# ==========================================

class TestGetAndDeleteBook:
    """Testes para GET /books/{id} e DELETE /books/{id}."""

    @pytest.mark.anyio
    async def test_get_unknown_returns_404(self, client: AsyncClient):
        """Livro inexistente deve retornar 404."""
        response = await client.get(f"{BOOKS_URL}/999")

        assert response.status_code == 404

    @pytest.mark.anyio
    async def test_get_returns_last_saved_version(self, client: AsyncClient):
        """Busca deve refletir a última gravação."""
        book = await create_book(client, title="Dune")
        await client.put(BOOKS_URL, json={"id": book["id"], "title": "Dune (rev)"})

        response = await client.get(f"{BOOKS_URL}/{book['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Dune (rev)"

    @pytest.mark.anyio
    async def test_delete_removes_book(self, client: AsyncClient):
        """Após remover, a busca deve retornar 404."""
        book = await create_book(client, title="Dune")

        response = await client.delete(f"{BOOKS_URL}/{book['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["X-libraryApp-alert"] == "libraryApp.book.deleted"
        assert response.headers["X-libraryApp-params"] == str(book["id"])
        assert (await client.get(f"{BOOKS_URL}/{book['id']}")).status_code == 404

    @pytest.mark.anyio
    async def test_delete_unknown_is_noop(self, client: AsyncClient):
        """Remover id inexistente deve retornar 200 sem erro."""
        response = await client.delete(f"{BOOKS_URL}/999")

        assert response.status_code == 200


# ==========================================
# Test: Cenário completo
# ==========================================

@pytest.mark.anyio
async def test_dune_lifecycle(client: AsyncClient):
    """Criar, buscar, atualizar, buscar, remover e buscar novamente."""
    response = await client.post(BOOKS_URL, json={"title": "Dune"})
    assert response.status_code == 201
    assert response.json()["id"] == 1

    response = await client.get(f"{BOOKS_URL}/1")
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert response.json()["title"] == "Dune"

    response = await client.put(BOOKS_URL, json={"id": 1, "title": "Dune (rev)"})
    assert response.status_code == 200

    response = await client.get(f"{BOOKS_URL}/1")
    assert response.json()["title"] == "Dune (rev)"

    response = await client.delete(f"{BOOKS_URL}/1")
    assert response.status_code == 200

    response = await client.get(f"{BOOKS_URL}/1")
    assert response.status_code == 404
