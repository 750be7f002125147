"""Card API endpoints.

Provides CRUD over the in-memory playing-card collection.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.api.schemas import CardCreateRequest, CardSchema, MessageResponse
from catalog_api.cards.store import Card, CardStore, get_card_store

router = APIRouter(prefix="/cards", tags=["Cards"])

Cards = Annotated[CardStore, Depends(get_card_store)]

CARD_NOT_FOUND = {"message": "Card not found"}


def parse_card_id(card_id: str) -> int | None:
    """Parse a path id, returning None for anything but an integer."""
    try:
        return int(card_id)
    except ValueError:
        return None


def card_to_schema(card: Card) -> CardSchema:
    return CardSchema(id=card.id, suit=card.suit, value=card.value)


@router.get("", response_model=list[CardSchema])
async def list_cards(cards: Cards) -> list[CardSchema]:
    """List all cards."""
    return [card_to_schema(c) for c in cards.list_cards()]


@router.get(
    "/{card_id}",
    response_model=CardSchema,
    responses={404: {"model": MessageResponse}},
)
async def get_card(card_id: str, cards: Cards) -> CardSchema:
    """Get a card by ID.

    Non-numeric ids cannot match any card and answer 404.
    """
    parsed = parse_card_id(card_id)
    card = cards.get(parsed) if parsed is not None else None
    if card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CARD_NOT_FOUND)
    return card_to_schema(card)


@router.post(
    "",
    response_model=CardSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def create_card(request: CardCreateRequest, cards: Cards) -> CardSchema:
    """Add a card to the collection."""
    if not request.suit or not request.value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Suit and value are required."},
        )
    return card_to_schema(cards.add(request.suit, request.value))


@router.delete(
    "/{card_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
)
async def delete_card(card_id: str, cards: Cards) -> MessageResponse:
    """Remove a card by ID."""
    parsed = parse_card_id(card_id)
    if parsed is None or not cards.remove(parsed):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CARD_NOT_FOUND)
    return MessageResponse(message="Card deleted successfully")
