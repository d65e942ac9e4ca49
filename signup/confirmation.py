from signup.state import SignupForm

HEADING = "Form Submission Successful \U0001F389"


def render_confirmation(payload: SignupForm) -> str:
    """
    Echo the submitted form verbatim under the success heading, as
    2-space indented JSON with the form's external field names.
    """
    body = payload.model_dump_json(by_alias=True, indent=2)
    return f"{HEADING}\n\n{body}"
