from langgraph.graph import StateGraph, START, END

from signup.state import SignupState
from signup.validator import SignupValidator


class SignupGraphFactory:
    def __init__(self, validator: SignupValidator):
        self.validator = validator

    @staticmethod
    def submitted_node(state: SignupState) -> SignupState:
        """
        Terminal point. Only reached when whole-form validation left no
        errors, so the form here is complete.
        """
        return state.model_copy(update={"status": "submitted"})

    def build(self) -> StateGraph:
        g = StateGraph(SignupState)

        g.add_node("validate", self.validator.validate_node)
        g.add_node("submitted", self.submitted_node)

        g.add_edge(START, "validate")

        g.add_conditional_edges(
            "validate",
            self.validator.should_submit,
            {"end": END, "submit": "submitted"},
        )
        g.add_edge("submitted", END)

        return g

    def compile(self):
        return self.build().compile()
