"""
Normalization of Document AI responses.

Turns a documentai.Document into an ExtractedDocument. Text for pages and
entities is resolved through text anchors into the document's full text.
"""

from collections import defaultdict
from typing import Iterable, Optional

from google.cloud import documentai

from .models import BoundingBox, DocumentEntity, DocumentPage, ExtractedDocument


def text_from_anchor(full_text: str, anchor: documentai.Document.TextAnchor) -> str:
    """Concatenate the text segments an anchor points at."""
    return "".join(
        full_text[int(segment.start_index):int(segment.end_index)]
        for segment in anchor.text_segments
    )


def mean_confidence(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def bounding_box(entity: documentai.Document.Entity) -> Optional[BoundingBox]:
    """Box spanned by vertices 0 and 2 of the entity's first page reference."""
    if not entity.page_anchor.page_refs:
        return None

    vertices = entity.page_anchor.page_refs[0].bounding_poly.normalized_vertices
    if not vertices:
        return None

    top_left = vertices[0]
    bottom_right = vertices[2] if len(vertices) > 2 else top_left
    return BoundingBox(
        x=top_left.x,
        y=top_left.y,
        width=bottom_right.x - top_left.x,
        height=bottom_right.y - top_left.y,
    )


def entity_page(entity: documentai.Document.Entity) -> Optional[int]:
    """Zero-based page index the entity is anchored to, if any."""
    if not entity.page_anchor.page_refs:
        return None
    return int(entity.page_anchor.page_refs[0].page)


def normalize_entity(full_text: str, entity: documentai.Document.Entity) -> DocumentEntity:
    value = entity.mention_text or text_from_anchor(full_text, entity.text_anchor)
    return DocumentEntity(
        type=entity.type_,
        value=value,
        confidence=entity.confidence,
        bounding_box=bounding_box(entity),
    )


def normalize_document(document: documentai.Document) -> ExtractedDocument:
    """
    Build the normalized document.

    Pages are numbered from 1. A page's entities are those whose first page
    reference points at it; its confidence is their mean. The document
    confidence is the mean over all entities.
    """
    full_text = document.text or ""

    entities: list[DocumentEntity] = []
    by_page: dict[int, list[DocumentEntity]] = defaultdict(list)
    for raw in document.entities:
        entity = normalize_entity(full_text, raw)
        entities.append(entity)
        page_index = entity_page(raw)
        if page_index is not None:
            by_page[page_index].append(entity)

    pages = []
    for index, page in enumerate(document.pages):
        page_entities = by_page.get(index, [])
        pages.append(
            DocumentPage(
                page_number=index + 1,
                text=text_from_anchor(full_text, page.layout.text_anchor),
                entities=page_entities,
                confidence=mean_confidence(e.confidence for e in page_entities),
            )
        )

    return ExtractedDocument(
        text=full_text,
        entities=entities,
        pages=pages,
        confidence=mean_confidence(e.confidence for e in entities),
    )
