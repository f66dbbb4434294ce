"""Controller do formulário de anúncio (criação e edição).

Coordena o rascunho, as imagens pendentes, a consulta de CEP e o
salvamento em etapas. O ciclo de vida segue `fsm.DraftStateMachine`;
continuações assíncronas só são aplicadas se a geração do controller
não mudou desde o início da chamada (troca de anúncio ou dispose).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from app.observability.metrics import record_save_step
from client.api.base import Err
from client.controllers.form_draft import FormDraft
from client.controllers.image_staging import ImageStaging
from client.controllers.navigation import HOME_PATH, NEW_AD_PATH, edit_ad_path
from client.store import ad_images, ads
from client.store.notification import NotificationType
from client.zipcode import (
    ZIPCODE_ERROR_MESSAGE,
    ZIPCODE_NOT_FOUND_MESSAGE,
    ZIPCODE_PENDING_MESSAGE,
    ZipCodeResult,
    ZipCodeStatus,
    is_lookup_candidate,
)
from forms import AD_FIELDS
from fsm import DraftState, create_fsm

if TYPE_CHECKING:
    from client.api.ads import AdsApi, StagedFile
    from client.controllers.navigation import Confirmer, Navigator
    from client.store.core import Store
    from client.zipcode import ZipCodeLookup

logger = logging.getLogger(__name__)

CONFIRM_DISCARD_MESSAGE = "Você tem alterações não salvas. Deseja sair mesmo assim?"
CONFIRM_DELETE_MESSAGE = "Tem certeza que deseja remover este anúncio?"
IMAGE_TYPE_WARNING = "Apenas imagens JPEG ou PNG são aceitas"
IMAGE_UNDO_WARNING = "Não é possível restaurar: limite de {limit} imagens"


def image_limit_warning(limit: int, ignored: int) -> str:
    return f"Limite de {limit} imagens por anúncio. {ignored} arquivo(s) ignorado(s)."


class SaveStepKind(StrEnum):
    CORE = "core"
    DELETE_IMAGE = "delete_image"
    UPLOAD_IMAGE = "upload_image"


class SaveStepStatus(StrEnum):
    PENDING = "pending"
    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True)
class SaveStep:
    """Uma etapa do salvamento.

    Attributes:
        kind: Tipo da etapa
        target: Nome do arquivo nas etapas de imagem; None na etapa CORE
        status: Situação atual
        error: Mensagem de erro quando FAILED
        file: Arquivo pendente nas etapas de upload
    """

    kind: SaveStepKind
    target: str | None = None
    status: SaveStepStatus = SaveStepStatus.PENDING
    error: str | None = None
    file: StagedFile | None = field(default=None, repr=False)


@dataclass(frozen=True, slots=True)
class SaveOutcome:
    success: bool
    ad_id: str | None = None
    steps: tuple[SaveStep, ...] = ()
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def failed_step(self) -> SaveStep | None:
        return next((s for s in self.steps if s.status is SaveStepStatus.FAILED), None)


class AdDraftController:
    """Estado e operações do formulário de anúncio."""

    def __init__(
        self,
        store: Store,
        api: AdsApi,
        zipcode_lookup: ZipCodeLookup,
        navigator: Navigator,
        confirmer: Confirmer,
        *,
        max_images: int = 5,
    ) -> None:
        self._store = store
        self._api = api
        self._zipcode_lookup = zipcode_lookup
        self._navigator = navigator
        self._confirmer = confirmer
        self._draft = FormDraft(AD_FIELDS)
        self._staging = ImageStaging(limit=max_images)
        self._fsm = create_fsm(draft_id=uuid4().hex[:12])
        self._ad_id: str | None = None
        self._generation = 0
        self._last_steps: tuple[SaveStep, ...] = ()
        # Anúncio criado cuja rota de edição ainda não foi aberta
        self._redirect_pending = False

    # ──────────────────────────────────────────────────────────────
    # Estado exposto à tela
    # ──────────────────────────────────────────────────────────────

    @property
    def state(self) -> DraftState:
        return self._fsm.current_state

    @property
    def ready(self) -> bool:
        """O formulário só pode ser exibido em EDITING."""
        return self.state is DraftState.EDITING

    @property
    def disposed(self) -> bool:
        return self.state is DraftState.DISPOSED

    @property
    def ad_id(self) -> str | None:
        return self._ad_id

    @property
    def draft(self) -> FormDraft:
        return self._draft

    @property
    def values(self) -> dict[str, Any]:
        return self._draft.values

    @property
    def errors(self) -> dict[str, str]:
        return self._draft.visible_errors

    @property
    def staged_additions(self) -> tuple[StagedFile, ...]:
        return self._staging.additions

    @property
    def staged_deletions(self) -> tuple[str, ...]:
        return self._staging.deletions

    @property
    def persisted_images(self) -> tuple[str, ...]:
        images_state = self._store.select(ad_images.NAME)
        if self._ad_id is None or images_state.ad_id != self._ad_id:
            return ()
        return images_state.images

    @property
    def visible_image_count(self) -> int:
        return self._staging.visible_count(self.persisted_images)

    @property
    def is_dirty(self) -> bool:
        return self._draft.is_dirty or not self._staging.is_empty

    @property
    def last_save_steps(self) -> tuple[SaveStep, ...]:
        return self._last_steps

    # ──────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────

    async def initialize(self, ad_id: str | None = None) -> None:
        """Prepara o rascunho: em branco (sem id) ou a partir do anúncio salvo."""
        if self.disposed:
            return
        if ad_id != self._ad_id:
            self._switch_ad(ad_id)

        if ad_id is None:
            self._enter(DraftState.EDITING, "initialize")
            return

        if not self._enter(DraftState.LOADING, "initialize"):
            return
        generation = self._generation

        ad_result = await ads.fetch_ad(self._store, self._api, ad_id)
        if not self._is_current(generation):
            return
        if isinstance(ad_result, Err):
            # Notificado pelo slice; segue como anúncio novo
            self._switch_ad(None)
            self._enter(DraftState.EDITING, "initialize_failed")
            return

        images_result = await ad_images.fetch_images(self._store, self._api, ad_id)
        if not self._is_current(generation):
            return
        if isinstance(images_result, Err):
            self._notify(images_result.error.message, NotificationType.ERROR)

        self._draft.reset(ad_result.value)
        self._enter(DraftState.EDITING, "initialize")

    def dispose(self) -> None:
        """Encerra o controller; respostas pendentes passam a ser ignoradas."""
        if self.disposed:
            return
        self._generation += 1
        self._fsm.transition(DraftState.DISPOSED, "dispose")
        logger.debug("ad_draft_disposed", extra=self._fsm.get_state_summary())

    # ──────────────────────────────────────────────────────────────
    # Campos
    # ──────────────────────────────────────────────────────────────

    def update_field(self, name: str, value: Any) -> None:
        if self.disposed:
            return
        self._draft.set(name, value)
        if name == "zipcode":
            self._draft.set_status("zipcode", None)

    def blur_field(self, name: str) -> None:
        if self.disposed:
            return
        self._draft.touch(name)

    async def lookup_zipcode(self) -> ZipCodeResult | None:
        """Consulta o CEP digitado e preenche endereço, cidade e UF.

        Returns:
            Resultado aplicado, ou None quando não houve consulta ou a
            resposta foi descartada (CEP alterado ou controller encerrado).
        """
        if self.disposed:
            return None
        zipcode = self._draft.get("zipcode")
        if not is_lookup_candidate(zipcode):
            return None

        generation = self._generation
        self._draft.touch("zipcode")
        self._draft.set_status("zipcode", ZIPCODE_PENDING_MESSAGE)
        result = await self._zipcode_lookup.lookup(zipcode)

        if not self._is_current(generation) or self._draft.get("zipcode") != zipcode:
            logger.debug("zipcode_result_discarded", extra={"draft_id": self._fsm.draft_id})
            return None

        self._draft.set_status("zipcode", None)
        if result.status is ZipCodeStatus.FOUND and result.address is not None:
            self._draft.set("address1", result.address.address1)
            self._draft.set("city", result.address.city)
            self._draft.set("state", result.address.state)
            self._draft.set_async_error("zipcode", None)
        elif result.status is ZipCodeStatus.NOT_FOUND:
            for name in ("address1", "city", "state"):
                self._draft.set(name, "")
            self._draft.set_async_error("zipcode", ZIPCODE_NOT_FOUND_MESSAGE)
        else:
            self._draft.set_async_error("zipcode", ZIPCODE_ERROR_MESSAGE)
        return result

    # ──────────────────────────────────────────────────────────────
    # Imagens
    # ──────────────────────────────────────────────────────────────

    def stage_images(self, files: Iterable[StagedFile]) -> tuple[StagedFile, ...]:
        """Seleciona imagens para envio; o que passar do limite é ignorado."""
        if self.disposed:
            return ()
        result = self._staging.stage(files, self.persisted_images)
        if result.invalid_type:
            self._notify(IMAGE_TYPE_WARNING, NotificationType.WARNING)
        if result.over_limit:
            self._notify(
                image_limit_warning(self._staging.limit, len(result.over_limit)),
                NotificationType.WARNING,
            )
        return result.accepted

    def unstage_image(self, index: int) -> StagedFile:
        return self._staging.unstage(index)

    def mark_image_for_deletion(self, filename: str) -> bool:
        return self._staging.mark_for_deletion(filename, self.persisted_images)

    def undo_image_deletion(self, filename: str) -> bool:
        restored = self._staging.undo_deletion(filename, self.persisted_images)
        if not restored and filename in self._staging.deletions:
            self._notify(
                IMAGE_UNDO_WARNING.format(limit=self._staging.limit), NotificationType.WARNING
            )
        return restored

    # ──────────────────────────────────────────────────────────────
    # Salvamento
    # ──────────────────────────────────────────────────────────────

    async def submit(self) -> SaveOutcome:
        """Valida e salva: campos do anúncio, remoções e envios de imagens.

        Cada etapa de imagem concluída sai da lista pendente; numa falha
        o fluxo para e um novo submit executa só o que faltou.
        """
        if not self._fsm.can_transition_to(DraftState.SAVING):
            logger.info("ad_submit_ignored", extra={"state": self.state.name})
            return SaveOutcome(success=False, ad_id=self._ad_id)

        field_errors = self._draft.validate_all()
        if field_errors:
            return SaveOutcome(success=False, ad_id=self._ad_id, field_errors=field_errors)

        generation = self._generation
        steps = self._plan_steps()
        self._last_steps = steps
        self._enter(DraftState.SAVING, "submit")

        if not await self._run_core_step(steps[0], generation):
            return self._finish(steps, generation, success=False)

        self._enter(DraftState.SYNCING_IMAGES, "sync_images")
        for step in steps[1:]:
            if not await self._run_image_step(step, generation):
                return self._finish(steps, generation, success=False)

        if self._ad_id is not None:
            await ad_images.fetch_images(self._store, self._api, self._ad_id)
        outcome = self._finish(steps, generation, success=True)
        if outcome.success and self._redirect_pending and self._ad_id is not None:
            self._redirect_pending = False
            self._navigator.navigate(edit_ad_path(self._ad_id))
        return outcome

    def _plan_steps(self) -> tuple[SaveStep, ...]:
        return (
            SaveStep(SaveStepKind.CORE),
            *(SaveStep(SaveStepKind.DELETE_IMAGE, name) for name in self._staging.deletions),
            *(SaveStep(SaveStepKind.UPLOAD_IMAGE, f.filename, file=f) for f in self._staging.additions),
        )

    async def _run_core_step(self, step: SaveStep, generation: int) -> bool:
        creating = self._ad_id is None
        if not creating and not self._draft.is_dirty:
            # Campos já salvos (ex: retry após falha de imagem)
            step.status = SaveStepStatus.SKIPPED
            return True

        if creating:
            result = await ads.create_ad(self._store, self._api, self._draft.values)
        else:
            result = await ads.update_ad(self._store, self._api, self._ad_id, self._draft.values)
        if not self._is_current(generation):
            return False
        if isinstance(result, Err):
            self._fail_step(step, result.error.message, notify=False)
            return False

        saved = result.value
        self._ad_id = saved["id"]
        self._redirect_pending = self._redirect_pending or creating
        self._draft.reset(saved)
        self._complete_step(step)
        return True

    async def _run_image_step(self, step: SaveStep, generation: int) -> bool:
        ad_id = self._ad_id
        if step.kind is SaveStepKind.DELETE_IMAGE:
            result = await ad_images.delete_image(self._store, self._api, ad_id, step.target)
            if not self._is_current(generation):
                return False
            if isinstance(result, Err):
                self._fail_step(step, f"Erro ao remover imagem {step.target}: {result.error.message}")
                return False
            self._staging.complete_deletion(step.target)
        else:
            staged = step.file
            result = await ad_images.upload_image(self._store, self._api, ad_id, staged)
            if not self._is_current(generation):
                return False
            if isinstance(result, Err):
                self._fail_step(step, f"Erro ao enviar imagem {step.target}: {result.error.message}")
                return False
            self._staging.complete_upload(staged)
        self._complete_step(step)
        return True

    def _complete_step(self, step: SaveStep) -> None:
        step.status = SaveStepStatus.DONE
        record_save_step(str(step.kind), str(step.status), self._ad_id)

    def _fail_step(self, step: SaveStep, message: str, *, notify: bool = True) -> None:
        step.status = SaveStepStatus.FAILED
        step.error = message
        record_save_step(str(step.kind), str(step.status), self._ad_id)
        if notify:
            self._notify(message, NotificationType.ERROR)

    def _finish(self, steps: tuple[SaveStep, ...], generation: int, *, success: bool) -> SaveOutcome:
        if self._is_current(generation):
            self._enter(DraftState.EDITING, "saved" if success else "save_failed")
        else:
            success = False
        return SaveOutcome(success=success, ad_id=self._ad_id, steps=steps)

    # ──────────────────────────────────────────────────────────────
    # Navegação
    # ──────────────────────────────────────────────────────────────

    def cancel(self) -> bool:
        """Sai do formulário para a home; retorna False se o usuário desistir."""
        if self.disposed or not self._confirm_discard():
            return False
        self._switch_ad(None)
        self._enter(DraftState.CLOSED, "cancel")
        self._navigator.navigate(HOME_PATH)
        return True

    def new_ad(self) -> bool:
        """Recomeça com um anúncio em branco em /ad."""
        if self.disposed or not self._confirm_discard():
            return False
        self._switch_ad(None)
        self._enter(DraftState.EDITING, "new_ad")
        self._navigator.navigate(NEW_AD_PATH)
        return True

    async def delete_ad(self) -> bool:
        """Remove o anúncio (após confirmação) e volta ao estado de anúncio novo."""
        if self.disposed or not self._confirmer.confirm(CONFIRM_DELETE_MESSAGE):
            return False

        if self._ad_id is not None:
            generation = self._generation
            result = await ads.delete_ad(self._store, self._api, self._ad_id)
            if not self._is_current(generation) or isinstance(result, Err):
                return False

        self._switch_ad(None)
        self._enter(DraftState.EDITING, "delete_ad")
        return True

    # ──────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────

    def _confirm_discard(self) -> bool:
        if not self.is_dirty:
            return True
        return self._confirmer.confirm(CONFIRM_DISCARD_MESSAGE)

    def _switch_ad(self, ad_id: str | None) -> None:
        """Troca a identidade do anúncio: descarta rascunho, seleção e respostas pendentes."""
        self._generation += 1
        self._ad_id = ad_id
        self._draft.reset()
        self._staging.clear()
        self._last_steps = ()
        self._redirect_pending = False
        self._store.dispatch(ad_images.clear_images())

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation and not self.disposed

    def _enter(self, target: DraftState, trigger: str) -> bool:
        if self.state is target and target is not DraftState.LOADING:
            return True
        result = self._fsm.transition(target, trigger)
        if not result.success:
            logger.info(
                "ad_draft_transition_rejected",
                extra={"draft_id": self._fsm.draft_id, "reason": result.error_reason},
            )
        return result.success

    def _notify(self, message: str, type: NotificationType) -> None:
        self._store.notifier.show(message, type)
