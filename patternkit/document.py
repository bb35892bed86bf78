"""A document whose allowed operations depend on its workflow state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


class OperationNotAllowedError(RuntimeError):
    """Raised when an operation is not permitted in the document's current state."""


class DocumentState:
    """Base state: every operation is refused unless a subclass allows it."""

    name = ""

    def __init__(self) -> None:
        self.document: Document | None = None

    def _refuse(self, operation: str) -> None:
        raise OperationNotAllowedError(
            f"operation {operation}() not allowed in state {self.name}"
        )

    def _context(self) -> Document:
        if self.document is None:
            raise RuntimeError(f"state {self.name} is not attached to a document")
        return self.document

    def save(self) -> None:
        self._refuse("Save")

    def submit_for_review(self) -> None:
        self._refuse("SubmitForReview")

    def approve(self) -> None:
        self._refuse("Approve")

    def reject(self) -> None:
        self._refuse("Reject")

    def archive(self) -> None:
        self._refuse("Archive")


class DraftState(DocumentState):
    """A draft can be saved and submitted for review."""

    name = "Draft"

    def save(self) -> None:
        print("DraftState: Saving document...")
        print("DraftState: Document saved.")

    def submit_for_review(self) -> None:
        print("DraftState: Submitting document for review...")
        self._context().set_state(ModerationState())
        print("DraftState: Document submitted for review.")


class ModerationState(DocumentState):
    """A document under review can be approved or rejected."""

    name = "Moderation"

    def approve(self) -> None:
        print("ModerationState: Approving document...")
        self._context().set_state(PublishedState())
        print("ModerationState: Document approved.")

    def reject(self) -> None:
        print("ModerationState: Rejecting document...")
        self._context().set_state(DraftState())
        print("ModerationState: Document rejected, moved back to Draft.")


class PublishedState(DocumentState):
    """A published document can only be archived."""

    name = "Published"

    def archive(self) -> None:
        print("PublishedState: Archiving document...")
        self._context().set_state(ArchivedState())
        print("PublishedState: Document archived.")


class ArchivedState(DocumentState):
    """An archived document allows no further operations."""

    name = "Archived"


@dataclass
class Document:
    """A titled piece of content moving through a review workflow."""

    title: str
    content: str
    state: DocumentState | None = field(default=None)

    def set_state(self, state: DocumentState) -> None:
        """Switch to a new state and attach it to this document."""
        self.state = state
        state.document = self
        print(f"--- Document state changed to: {state.name} ---")

    def _require_state(self, operation: str) -> DocumentState:
        if self.state is None:
            raise RuntimeError("document has no state")
        print(f"Document: Calling {operation}() in state {self.state.name}")
        return self.state

    def save(self) -> None:
        self._require_state("Save").save()

    def submit_for_review(self) -> None:
        self._require_state("SubmitForReview").submit_for_review()

    def approve(self) -> None:
        self._require_state("Approve").approve()

    def reject(self) -> None:
        self._require_state("Reject").reject()

    def archive(self) -> None:
        self._require_state("Archive").archive()

    def current_state_name(self) -> str:
        """Name of the current state, or "Unknown" when none is set."""
        if self.state is None:
            return "Unknown"
        return self.state.name


def main(argv: Sequence[str] | None = None) -> None:
    """Walk a sample document through its workflow, including refused steps."""
    print("Creating a new doc...")
    doc = Document("My Awesome Article", "This is the content of the article.")
    doc.set_state(DraftState())

    print(f"Current state: {doc.current_state_name()}")
    print("--------------------")

    steps = [
        doc.save,
        doc.approve,
        doc.submit_for_review,
        doc.submit_for_review,
        doc.reject,
        doc.submit_for_review,
        doc.approve,
        doc.save,
        doc.archive,
        doc.save,
        doc.approve,
    ]
    for step in steps:
        try:
            step()
        except OperationNotAllowedError as err:
            print("Error:", err)
        print(f"Current state: {doc.current_state_name()}")
        print("--------------------")


if __name__ == "__main__":
    main()