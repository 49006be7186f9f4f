"""
Test suite for CatalogService against an in-memory SQLite database.

Covers company scoping of productions and documents, the joined listing
shape, and immutability of a production's owning company.

System role: Verification of the metadata catalog
"""

import pytest

from docvault.application.services import CatalogService
from docvault.boundary.db.models import ProductionModel


@pytest.fixture
def catalog(test_async_db) -> CatalogService:
    return CatalogService(test_async_db)


async def add_document(catalog: CatalogService, production_id: int, file_name: str) -> int:
    document_id = await catalog.insert_document(
        production_id=production_id,
        file_name=file_name,
        blob_key=f"uploads/1_{file_name}",
        version="v1",
        content_type="application/pdf",
        size_bytes=10,
    )
    await catalog.db.commit()
    return document_id


class TestProductions:
    async def test_lists_only_own_productions(self, catalog, tenants):
        extra = ProductionModel(name="Summer Teaser", company_id=tenants.company_a.id)
        catalog.db.add(extra)
        await catalog.db.commit()

        productions = await catalog.list_productions(tenants.company_a.id)

        assert [p.name for p in productions] == ["Spring Campaign", "Summer Teaser"]
        assert all(p.company_id == tenants.company_a.id for p in productions)

    async def test_unknown_company_has_no_productions(self, catalog, tenants):
        assert list(await catalog.list_productions(12345)) == []

    async def test_get_production_for_company(self, catalog, tenants):
        own = await catalog.get_production_for_company(42, tenants.company_a.id)
        foreign = await catalog.get_production_for_company(42, tenants.company_b.id)

        assert own is not None and own.name == "Spring Campaign"
        assert foreign is None

    async def test_company_id_is_immutable(self, tenants):
        with pytest.raises(ValueError):
            tenants.production_a.company_id = tenants.company_b.id

    async def test_same_company_id_assignment_allowed(self, tenants):
        tenants.production_a.company_id = tenants.company_a.id
        assert tenants.production_a.company_id == tenants.company_a.id


class TestDocuments:
    async def test_list_documents_is_tenant_isolated(self, catalog, tenants):
        await add_document(catalog, tenants.production_a.id, "a1.pdf")
        await add_document(catalog, tenants.production_b.id, "b1.pdf")
        await add_document(catalog, tenants.production_a.id, "a2.pdf")

        docs_a = await catalog.list_documents(tenants.company_a.id)
        docs_b = await catalog.list_documents(tenants.company_b.id)

        assert [d.file_name for d in docs_a] == ["a1.pdf", "a2.pdf"]
        assert [d.file_name for d in docs_b] == ["b1.pdf"]
        assert {d.company_name for d in docs_a} == {"Acme Films"}

    async def test_list_documents_includes_context(self, catalog, tenants):
        document_id = await add_document(catalog, tenants.production_a.id, "a1.pdf")

        (doc,) = await catalog.list_documents(tenants.company_a.id)

        assert doc.id == document_id
        assert doc.production_id == 42
        assert doc.production_name == "Spring Campaign"
        assert doc.company_name == "Acme Films"
        assert doc.version == "v1"
        assert doc.blob_key == "uploads/1_a1.pdf"
        assert doc.created_at is not None

    async def test_get_document_for_company_scopes(self, catalog, tenants):
        document_id = await add_document(catalog, tenants.production_b.id, "b1.pdf")

        assert await catalog.get_document_for_company(document_id, tenants.company_a.id) is None
        found = await catalog.get_document_for_company(document_id, tenants.company_b.id)
        assert found is not None and found.file_name == "b1.pdf"

    async def test_get_document_unscoped(self, catalog, tenants):
        document_id = await add_document(catalog, tenants.production_b.id, "b1.pdf")

        assert (await catalog.get_document(document_id)).file_name == "b1.pdf"
        assert await catalog.get_document(999999) is None
