from typing import Any, Dict, Literal, Optional, Tuple, Union

import structlog

from signup.countries import CountryCityTable
from signup.graph import SignupGraphFactory
from signup.navigation import Navigator
from signup.state import ALIAS_TO_ATTR, SignupForm, SignupState
from signup.validator import SignupField, SignupValidator, UnknownFieldError

logger = structlog.get_logger(__name__)

SHOW_PASSWORD = "showPassword"


class SignupController:
    """
    Owns the form values and error messages for one signup view.

    Event handlers run synchronously and to completion. Once a submit has
    succeeded the controller is in its terminal "submitted" state and every
    further event is ignored. ``is_submit_enabled``
    is advisory; ``on_submit`` validates the whole form again and is the only
    thing that decides whether navigation happens.
    """

    def __init__(
        self,
        navigator: Navigator,
        table: Optional[CountryCityTable] = None,
        validator: Optional[SignupValidator] = None,
        success_route: str = "/success",
    ):
        self.navigator = navigator
        self.table = table if table is not None else CountryCityTable()
        self.validator = validator if validator is not None else SignupValidator()
        self.success_route = success_route
        self.graph = SignupGraphFactory(self.validator).compile()

        self.form = SignupForm()
        self.errors: Dict[str, str] = {}
        self.status: Literal["editing", "submitted"] = "editing"

    @staticmethod
    def _field_name(name: Union[str, SignupField]) -> str:
        key = name.value if isinstance(name, SignupField) else name
        if key not in ALIAS_TO_ATTR:
            raise UnknownFieldError(name)
        return key

    def _ignore_after_submit(self, event: str) -> bool:
        if self.status == "submitted":
            logger.warning("event_after_submit_ignored", event=event)
            return True
        return False

    def on_field_change(self, name: Union[str, SignupField], value: Any) -> None:
        key = self._field_name(name)
        if self._ignore_after_submit("change"):
            return
        self.form = self.form.with_value(key, value)

        # country narrows city_options() but leaves the chosen city alone
        if key != SHOW_PASSWORD:
            self._validate_one(key, value)

    def on_field_blur(self, name: Union[str, SignupField], value: str) -> None:
        key = self._field_name(name)
        if self._ignore_after_submit("blur"):
            return
        if key != SHOW_PASSWORD:
            self._validate_one(key, value)

    def toggle_show_password(self) -> None:
        if self._ignore_after_submit("toggle_show_password"):
            return
        self.form = self.form.with_value(SHOW_PASSWORD, not self.form.show_password)

    def _validate_one(self, key: str, value: str) -> None:
        error = self.validator.validate_field(key, value)
        self.errors = {**self.errors, key: error}
        logger.debug("field_validated", field=key, has_error=bool(error))

    def on_submit(self) -> bool:
        if self._ignore_after_submit("submit"):
            return False

        result = self.graph.invoke(
            {"form": self.form, "errors": {}, "status": "editing"}
        )
        state = SignupState.model_validate(result)
        self.errors = dict(state.errors)

        if state.status != "submitted":
            logger.warning(
                "submit_rejected",
                failing_fields=sorted(self.errors.keys()),
            )
            return False

        self.status = "submitted"
        snapshot = self.form.model_copy(deep=True)
        logger.info("submit_accepted", route=self.success_route)
        self.navigator.navigate_to(self.success_route, snapshot)
        return True

    @property
    def is_submit_enabled(self) -> bool:
        return self.validator.is_submit_enabled(self.form, self.errors)

    @property
    def is_city_enabled(self) -> bool:
        return self.form.country != ""

    def country_options(self) -> Tuple[str, ...]:
        return self.table.countries()

    def city_options(self) -> Tuple[str, ...]:
        return self.table.cities_for(self.form.country)
