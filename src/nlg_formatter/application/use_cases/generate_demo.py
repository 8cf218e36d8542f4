"""Use Case: Generate Demo Document.

Builds a small sample tree that exercises every layout rule.
"""

from nlg_formatter.domain.models.document import DocumentElement
from nlg_formatter.domain.models.factory import (
    create_document,
    create_list,
    create_list_item,
    create_paragraph,
    create_section,
    create_sentence,
)


class GenerateDemoUseCase:
    """Build a sample document with titles, paragraphs and a list."""

    def execute(self, title: str = "Weekly Report") -> DocumentElement:
        """Return a fully populated demo document tree."""
        return create_document(
            title,
            [
                create_section(
                    "Summary",
                    [
                        create_paragraph(
                            [
                                create_sentence("Sales rose by 4% this week."),
                                create_sentence("Returns stayed flat."),
                            ]
                        ),
                        create_paragraph(
                            [create_sentence("The new warehouse opens on Monday.")]
                        ),
                    ],
                ),
                create_list(
                    "Actions",
                    [
                        create_list_item(create_sentence("Restock the north site")),
                        create_list_item(create_sentence("Review supplier contracts")),
                    ],
                ),
            ],
        )
