from decimal import Decimal
from typing import Dict, Any
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from travel_agency.data.models.cart import CartModel
from travel_agency.data.models.cart_item import CartItemModel
from travel_agency.domain.errors import CartLineNotFoundError, ForbiddenError, StorageError, TourNotFoundError
from travel_agency.domain.schemas import CartOut, CartLineOut
from travel_agency.repos.cart_repo import CartRepo
from travel_agency.services.catalog_service import CatalogService
from travel_agency.utils.retry import ConflictError, conflict_retry
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk usera: jeden na usera, tworzony leniwie przy pierwszym dodaniu.
    commands (add, remove) modyfikuja stan
    query (view) tylko odczyt, total zawsze liczony z aktualnych cen wycieczek

    Wspolbieznosc: zadnych blokad w aplikacji, pilnuja tego unique constrainty
    (carts.user_id, cart_items(cart_id, tour_id)) i atomowy UPDATE quantity + 1.
    Przegrany wyscig na insercie -> rollback i powtorka (tenacity).
    """

    def __init__(self, db: Session, catalog: CatalogService | None = None):
        self.repo = CartRepo(db)
        self.catalog = catalog or CatalogService(db)

    #query - odczyt
    def view_cart(self, user_id: int) -> CartOut:
        try:
            cart = self.repo.get_cart_by_user(user_id)
            rows = self.repo.get_cart_lines(cart.id) if cart else []
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Blad bazy podczas odczytu koszyka usera {user_id}: {e}")
            raise StorageError("Could not load cart") from e

        lines = [
            CartLineOut(
                id=item.id,
                tour_id=tour.id,
                tour_name=tour.name,
                price=tour.price,
                quantity=item.quantity,
                line_total=tour.price * item.quantity,
            )
            for item, tour in rows
        ]
        total = sum((line.line_total for line in lines), Decimal("0.00"))

        return CartOut(user_id=user_id, lines=lines, total=total)

    #commands
    def add_to_cart(self, user_id: int, tour_id: int) -> Dict[str, Any]:
        try:
            # rzuca TourNotFoundError, zanim cokolwiek zapiszemy
            tour_id = self.catalog.get_tour(tour_id).id
            cart_id = self._get_or_create_cart(user_id)
            line_id, quantity = self._put_line(cart_id, tour_id)
        except ConflictError as e:
            logger.error(f"Cart conflict for user {user_id}, tour {tour_id} not resolved: {e}")
            raise StorageError("Cart is busy, please try again") from e
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Blad bazy podczas dodawania wycieczki {tour_id}: {e}")
            raise StorageError("Could not update cart") from e

        logger.info(f"Tour {tour_id} in cart {cart_id} of user {user_id}, quantity {quantity}")

        return {"line_id": line_id, "quantity": quantity}

    def remove_from_cart(self, user_id: int, line_id: int) -> None:
        try:
            row = self.repo.get_item_with_owner(line_id)

            if row is None:
                raise CartLineNotFoundError(line_id)

            item, owner_id = row
            if owner_id != user_id:
                logger.warning(f"User {user_id} tried to remove cart item {line_id} of user {owner_id}")
                raise ForbiddenError("Cart item belongs to another user")

            self.repo.delete_item(item)
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Blad bazy podczas usuwania pozycji {line_id}: {e}")
            raise StorageError("Could not update cart") from e

        logger.info(f"Cart item {line_id} removed by user {user_id}")

    @conflict_retry()
    def _get_or_create_cart(self, user_id: int) -> int:
        existing = self.repo.get_cart_by_user(user_id)
        if existing:
            return existing.id

        try:
            created = self.repo.create_cart(CartModel(user_id=user_id))
        except IntegrityError as e:
            #ktos inny (rownolegly request) zalozyl koszyk pierwszy
            self.repo.rollback()
            raise ConflictError(f"cart for user {user_id}") from e

        logger.info(f"Utworzono nowy koszyk {created.id} dla uzytkownika {user_id}")
        return created.id

    @conflict_retry()
    def _put_line(self, cart_id: int, tour_id: int) -> tuple[int, int]:
        # Present(q) -> Present(q + 1)
        if self.repo.increment_item(cart_id, tour_id) == 0:
            # Absent -> Present(1)
            try:
                self.repo.insert_item(CartItemModel(cart_id=cart_id, tour_id=tour_id, quantity=1))
            except IntegrityError as e:
                self.repo.rollback()
                #klucz obcy: wycieczke usunieto po walidacji
                if not self.catalog.tour_exists(tour_id):
                    raise TourNotFoundError(tour_id) from e
                #rownolegly insert tej samej pary wygral, nastepna proba zrobi inkrementacje
                raise ConflictError(f"cart {cart_id}, tour {tour_id}") from e

        line_id, quantity = self.repo.get_item_state(cart_id, tour_id)
        self.repo.commit()
        return line_id, quantity
