"""Controllers dos formulários do cliente (anúncio, usuário e login)."""

from client.controllers.ad_form import (
    CONFIRM_DELETE_MESSAGE,
    CONFIRM_DISCARD_MESSAGE,
    AdDraftController,
    SaveOutcome,
    SaveStep,
    SaveStepKind,
    SaveStepStatus,
)
from client.controllers.form_draft import FormDraft
from client.controllers.image_staging import ImageStaging, StagingResult
from client.controllers.login_form import LoginController
from client.controllers.navigation import (
    HOME_PATH,
    LOGIN_PATH,
    NEW_AD_PATH,
    SIGNUP_PATH,
    Confirmer,
    Navigator,
    edit_ad_path,
)
from client.controllers.user_form import PROFILE_FIELDS, UserFormController, UserFormOutcome

__all__ = [
    "CONFIRM_DELETE_MESSAGE",
    "CONFIRM_DISCARD_MESSAGE",
    "HOME_PATH",
    "LOGIN_PATH",
    "NEW_AD_PATH",
    "PROFILE_FIELDS",
    "SIGNUP_PATH",
    "AdDraftController",
    "Confirmer",
    "FormDraft",
    "ImageStaging",
    "LoginController",
    "Navigator",
    "SaveOutcome",
    "SaveStep",
    "SaveStepKind",
    "SaveStepStatus",
    "StagingResult",
    "UserFormController",
    "UserFormOutcome",
    "edit_ad_path",
]
