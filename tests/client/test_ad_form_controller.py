"""Testes do controller do formulário de anúncio."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from client.api import ApiError, ApiErrorKind, Err, Ok, StagedFile
from client.controllers import AdDraftController
from client.controllers.ad_form import SaveStepKind, SaveStepStatus
from client.store import create_store, notification
from client.zipcode import ZipCodeAddress, ZipCodeResult, ZipCodeStatus
from fsm import DraftState

VALID_AD = {"title": "Bolo caseiro", "short": "Sob encomenda", "description": "Chocolate e cenoura"}


def _jpeg(name: str) -> StagedFile:
    return StagedFile(name, b"\xff\xd8", "image/jpeg")


def _err(message: str = "Falha no servidor") -> Err:
    return Err(ApiError(ApiErrorKind.SERVER, message, 500))


@pytest.fixture
def api() -> MagicMock:
    api = MagicMock()
    api.get = AsyncMock(return_value=Ok({"id": "ad1", "user_id": "u1", **VALID_AD}))
    api.list_images = AsyncMock(return_value=Ok([]))
    api.create = AsyncMock(side_effect=lambda fields: Ok({"id": "ad1", "user_id": "u1", **fields}))
    api.update = AsyncMock(side_effect=lambda ad_id, fields: Ok({"id": ad_id, "user_id": "u1", **fields}))
    api.delete = AsyncMock(return_value=Ok({"message": "Anúncio removido"}))
    api.upload_image = AsyncMock(
        side_effect=lambda ad_id, file: Ok({"filename": f"srv-{file.filename}", "path": "/uploads/x"})
    )
    api.delete_image = AsyncMock(return_value=Ok({"deleted": True}))
    return api


@pytest.fixture
def zipcode() -> MagicMock:
    lookup = MagicMock()
    lookup.lookup = AsyncMock(
        return_value=ZipCodeResult(
            ZipCodeStatus.FOUND, ZipCodeAddress(address1="Praça da Sé", city="São Paulo", state="SP")
        )
    )
    return lookup


@pytest.fixture
def navigator() -> MagicMock:
    return MagicMock()


@pytest.fixture
def confirmer() -> MagicMock:
    confirmer = MagicMock()
    confirmer.confirm = MagicMock(return_value=True)
    return confirmer


@pytest.fixture
def store():
    return create_store()


@pytest.fixture
def controller(store, api, zipcode, navigator, confirmer) -> AdDraftController:
    return AdDraftController(store, api, zipcode, navigator, confirmer, max_images=5)


def _fill(controller: AdDraftController, values: dict[str, str] = VALID_AD) -> None:
    for name, value in values.items():
        controller.update_field(name, value)


def _message(store) -> str | None:
    return store.select(notification.NAME).message


class TestInitialize:
    @pytest.mark.asyncio
    async def test_new_ad_is_ready_immediately(self, controller: AdDraftController, api: MagicMock) -> None:
        await controller.initialize()

        assert controller.ready is True
        assert controller.ad_id is None
        api.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edit_loads_ad_and_images(self, controller: AdDraftController, api: MagicMock) -> None:
        api.list_images.return_value = Ok(["a.jpg", "b.jpg"])

        await controller.initialize("ad1")

        assert controller.state is DraftState.EDITING
        assert controller.values["title"] == "Bolo caseiro"
        assert controller.persisted_images == ("a.jpg", "b.jpg")
        assert controller.is_dirty is False

    @pytest.mark.asyncio
    async def test_load_failure_falls_back_to_blank_draft(
        self, controller: AdDraftController, api: MagicMock, store
    ) -> None:
        api.get.return_value = Err(ApiError(ApiErrorKind.NOT_FOUND, "Anúncio não encontrado", 404))

        await controller.initialize("ad1")

        assert controller.ready is True
        assert controller.ad_id is None
        assert controller.values["title"] == ""
        assert _message(store) == "Anúncio não encontrado"

    @pytest.mark.asyncio
    async def test_dispose_during_load_discards_response(
        self, controller: AdDraftController, api: MagicMock
    ) -> None:
        async def _get(ad_id: str):
            controller.dispose()
            return Ok({"id": ad_id, **VALID_AD})

        api.get.side_effect = _get

        await controller.initialize("ad1")

        assert controller.disposed is True
        assert controller.values["title"] == ""
        api.list_images.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_disposed_controller_ignores_calls(self, controller: AdDraftController, api: MagicMock) -> None:
        controller.dispose()

        await controller.initialize("ad1")
        controller.update_field("title", "x")

        assert controller.values["title"] == ""
        assert (await controller.submit()).success is False
        api.get.assert_not_awaited()


class TestZipcode:
    @pytest.mark.asyncio
    async def test_found_fills_address(self, controller: AdDraftController) -> None:
        await controller.initialize()
        controller.update_field("zipcode", "01001-000")

        result = await controller.lookup_zipcode()

        assert result is not None and result.found
        assert controller.values["city"] == "São Paulo"
        assert controller.values["state"] == "SP"
        assert controller.values["address1"] == "Praça da Sé"
        assert controller.draft.status("zipcode") is None

    @pytest.mark.asyncio
    async def test_not_found_clears_address_and_shows_error(
        self, controller: AdDraftController, zipcode: MagicMock
    ) -> None:
        zipcode.lookup.return_value = ZipCodeResult(ZipCodeStatus.NOT_FOUND)
        await controller.initialize()
        controller.update_field("city", "Recife")
        controller.update_field("zipcode", "99999999")

        await controller.lookup_zipcode()

        assert controller.values["city"] == ""
        assert controller.errors["zipcode"] == "CEP não encontrado"

    @pytest.mark.asyncio
    async def test_short_zipcode_is_not_looked_up(self, controller: AdDraftController, zipcode: MagicMock) -> None:
        await controller.initialize()
        controller.update_field("zipcode", "0100")

        assert await controller.lookup_zipcode() is None
        zipcode.lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stale_result_is_discarded(self, controller: AdDraftController, zipcode: MagicMock) -> None:
        async def _lookup(value: str) -> ZipCodeResult:
            controller.update_field("zipcode", "02002000")
            return ZipCodeResult(ZipCodeStatus.FOUND, ZipCodeAddress("Rua A", "Campinas", "SP"))

        zipcode.lookup.side_effect = _lookup
        await controller.initialize()
        controller.update_field("zipcode", "01001000")

        assert await controller.lookup_zipcode() is None
        assert controller.values["city"] == ""

    @pytest.mark.asyncio
    async def test_lookup_error_does_not_block_submit(
        self, controller: AdDraftController, zipcode: MagicMock, api: MagicMock
    ) -> None:
        zipcode.lookup.return_value = ZipCodeResult(ZipCodeStatus.ERROR)
        await controller.initialize()
        _fill(controller, {**VALID_AD, "zipcode": "01001000"})
        await controller.lookup_zipcode()
        assert controller.errors["zipcode"] == "Erro ao buscar CEP"

        outcome = await controller.submit()

        assert outcome.success is True
        api.create.assert_awaited_once()


class TestImages:
    @pytest.mark.asyncio
    async def test_staging_respects_limit_with_persisted_images(
        self, controller: AdDraftController, api: MagicMock, store
    ) -> None:
        api.list_images.return_value = Ok(["a.jpg", "b.jpg", "c.jpg"])
        await controller.initialize("ad1")

        accepted = controller.stage_images([_jpeg(f"{i}.jpg") for i in range(4)])

        assert len(accepted) == 2
        assert controller.visible_image_count == 5
        assert _message(store) == "Limite de 5 imagens por anúncio. 2 arquivo(s) ignorado(s)."

    @pytest.mark.asyncio
    async def test_undo_deletion_refused_at_limit(
        self, controller: AdDraftController, api: MagicMock, store
    ) -> None:
        api.list_images.return_value = Ok(["a.jpg", "b.jpg", "c.jpg", "d.jpg", "e.jpg"])
        await controller.initialize("ad1")

        assert controller.mark_image_for_deletion("a.jpg") is True
        controller.stage_images([_jpeg("novo.jpg")])

        assert controller.undo_image_deletion("a.jpg") is False
        assert _message(store) == "Não é possível restaurar: limite de 5 imagens"


class TestSubmit:
    @pytest.mark.asyncio
    async def test_validation_errors_block_network(self, controller: AdDraftController, api: MagicMock) -> None:
        await controller.initialize()

        outcome = await controller.submit()

        assert outcome.success is False
        assert set(outcome.field_errors) == {"title", "short", "description"}
        assert set(controller.errors) == {"title", "short", "description"}
        api.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_images_redirects_to_edit(
        self, controller: AdDraftController, api: MagicMock, navigator: MagicMock
    ) -> None:
        api.list_images.return_value = Ok(["srv-a.jpg", "srv-b.jpg"])
        await controller.initialize()
        _fill(controller)
        controller.stage_images([_jpeg("a.jpg"), _jpeg("b.jpg")])

        outcome = await controller.submit()

        assert outcome.success is True
        assert outcome.ad_id == "ad1"
        assert [s.kind for s in outcome.steps] == [
            SaveStepKind.CORE,
            SaveStepKind.UPLOAD_IMAGE,
            SaveStepKind.UPLOAD_IMAGE,
        ]
        assert all(s.status is SaveStepStatus.DONE for s in outcome.steps)
        assert controller.staged_additions == ()
        assert controller.persisted_images == ("srv-a.jpg", "srv-b.jpg")
        assert controller.state is DraftState.EDITING
        navigator.navigate.assert_called_once_with("/ad/ad1/edit")

    @pytest.mark.asyncio
    async def test_deletions_run_before_uploads(self, controller: AdDraftController, api: MagicMock) -> None:
        api.list_images.return_value = Ok(["old.jpg"])
        await controller.initialize("ad1")
        controller.mark_image_for_deletion("old.jpg")
        controller.stage_images([_jpeg("new.jpg")])
        order: list[str] = []
        api.delete_image.side_effect = lambda ad_id, name: order.append(f"del:{name}") or Ok({})
        api.upload_image.side_effect = lambda ad_id, f: order.append(f"up:{f.filename}") or Ok({"filename": "n.jpg"})

        outcome = await controller.submit()

        assert outcome.success is True
        assert outcome.steps[0].status is SaveStepStatus.SKIPPED
        assert order == ["del:old.jpg", "up:new.jpg"]
        api.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_partial_failure_then_retry_runs_only_remaining_steps(
        self, controller: AdDraftController, api: MagicMock, navigator: MagicMock, store
    ) -> None:
        await controller.initialize()
        _fill(controller)
        first, second = _jpeg("a.jpg"), _jpeg("b.jpg")
        controller.stage_images([first, second])
        api.upload_image.side_effect = [
            Ok({"filename": "srv-a.jpg"}),
            _err("Arquivo muito grande"),
            Ok({"filename": "srv-b.jpg"}),
        ]

        failed = await controller.submit()

        assert failed.success is False
        assert failed.ad_id == "ad1"
        assert failed.failed_step is not None
        assert failed.failed_step.target == "b.jpg"
        assert _message(store) == "Erro ao enviar imagem b.jpg: Arquivo muito grande"
        assert controller.staged_additions == (second,)
        assert controller.state is DraftState.EDITING
        navigator.navigate.assert_not_called()

        retried = await controller.submit()

        assert retried.success is True
        assert [s.kind for s in retried.steps] == [SaveStepKind.CORE, SaveStepKind.UPLOAD_IMAGE]
        assert retried.steps[0].status is SaveStepStatus.SKIPPED
        assert api.create.await_count == 1
        api.update.assert_not_awaited()
        assert api.upload_image.await_count == 3
        navigator.navigate.assert_called_once_with("/ad/ad1/edit")

    @pytest.mark.asyncio
    async def test_files_with_same_name_upload_their_own_content(
        self, controller: AdDraftController, api: MagicMock
    ) -> None:
        await controller.initialize()
        _fill(controller)
        first = StagedFile("foto.jpg", b"\xff\xd8primeira", "image/jpeg")
        second = StagedFile("foto.jpg", b"\xff\xd8segunda", "image/jpeg")
        controller.stage_images([first, second])
        api.upload_image.side_effect = [_err("Arquivo muito grande"), Ok({"filename": "a.jpg"}), Ok({"filename": "b.jpg"})]

        failed = await controller.submit()

        assert failed.success is False
        assert controller.staged_additions == (first, second)

        retried = await controller.submit()

        assert retried.success is True
        sent = [call.args[1] for call in api.upload_image.await_args_list]
        assert [f.content for f in sent] == [b"\xff\xd8primeira", b"\xff\xd8primeira", b"\xff\xd8segunda"]
        assert sent[2] is second
        assert retried.steps[2].file is second
        assert controller.staged_additions == ()

    @pytest.mark.asyncio
    async def test_core_failure_keeps_everything_staged(
        self, controller: AdDraftController, api: MagicMock, store
    ) -> None:
        api.create.side_effect = None
        api.create.return_value = _err("Serviço indisponível")
        await controller.initialize()
        _fill(controller)
        controller.stage_images([_jpeg("a.jpg")])

        outcome = await controller.submit()

        assert outcome.success is False
        assert outcome.failed_step is not None
        assert outcome.failed_step.kind is SaveStepKind.CORE
        assert len(controller.staged_additions) == 1
        assert controller.ad_id is None
        assert _message(store) == "Serviço indisponível"
        api.upload_image.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edit_updates_only_when_dirty(self, controller: AdDraftController, api: MagicMock) -> None:
        await controller.initialize("ad1")
        controller.update_field("city", "Olinda")

        outcome = await controller.submit()

        assert outcome.success is True
        api.update.assert_awaited_once()
        assert api.update.await_args.args[1]["city"] == "Olinda"
        assert controller.is_dirty is False


class TestNavigation:
    @pytest.mark.asyncio
    async def test_cancel_with_changes_asks_confirmation(
        self, controller: AdDraftController, confirmer: MagicMock, navigator: MagicMock
    ) -> None:
        await controller.initialize()
        controller.update_field("title", "Rascunho")
        confirmer.confirm.return_value = False

        assert controller.cancel() is False
        assert controller.values["title"] == "Rascunho"
        navigator.navigate.assert_not_called()

        confirmer.confirm.return_value = True
        assert controller.cancel() is True
        assert controller.state is DraftState.CLOSED
        assert controller.values["title"] == ""
        navigator.navigate.assert_called_once_with("/")

    @pytest.mark.asyncio
    async def test_cancel_without_changes_skips_confirmation(
        self, controller: AdDraftController, confirmer: MagicMock
    ) -> None:
        await controller.initialize()

        assert controller.cancel() is True
        confirmer.confirm.assert_not_called()

    @pytest.mark.asyncio
    async def test_new_ad_resets_identity(
        self, controller: AdDraftController, navigator: MagicMock
    ) -> None:
        await controller.initialize("ad1")

        assert controller.new_ad() is True
        assert controller.ad_id is None
        assert controller.ready is True
        navigator.navigate.assert_called_once_with("/ad")

    @pytest.mark.asyncio
    async def test_delete_ad(self, controller: AdDraftController, api: MagicMock, confirmer: MagicMock) -> None:
        await controller.initialize("ad1")

        confirmer.confirm.return_value = False
        assert await controller.delete_ad() is False
        api.delete.assert_not_awaited()

        confirmer.confirm.return_value = True
        assert await controller.delete_ad() is True
        api.delete.assert_awaited_once_with("ad1")
        assert controller.ad_id is None
        assert controller.ready is True
