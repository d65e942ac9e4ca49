from typing import Dict, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SignupForm(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    first_name: str = Field(default="", description="User's first name")
    last_name: str = Field(default="", description="User's last name")
    username: str = Field(default="")
    email: str = Field(default="", description="User email")
    password: str = Field(default="", description="At least 6 characters")
    show_password: bool = Field(default=False, description="Display toggle, never validated")
    phone_code: str = Field(default="", description="Dialling code like +91")
    phone_number: str = Field(default="", description="7-12 digit phone number")
    country: str = Field(default="")
    city: str = Field(default="", description="One of the selected country's cities")
    pan: str = Field(default="", description="Permanent Account Number")
    aadhar: str = Field(default="", description="12 digit Aadhar number")

    def value_of(self, name: str):
        return getattr(self, ALIAS_TO_ATTR[name])

    def with_value(self, name: str, value) -> "SignupForm":
        """
        Return a new form with one field replaced. Goes through validation so
        a wrong-typed value raises instead of being stored.
        """
        data = self.model_dump()
        data[ALIAS_TO_ATTR[name]] = value
        return SignupForm.model_validate(data)


ALIAS_TO_ATTR: Dict[str, str] = {
    to_camel(attr): attr for attr in SignupForm.model_fields
}


class SignupState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    form: SignupForm = Field(default_factory=SignupForm)
    errors: Dict[str, str] = Field(default_factory=dict)
    status: Literal["editing", "submitted"] = "editing"
