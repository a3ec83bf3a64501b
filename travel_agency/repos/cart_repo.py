# travel_agency/repos/cart_repo.py
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from travel_agency.data.models.cart import CartModel
from travel_agency.data.models.cart_item import CartItemModel
from travel_agency.data.models.tour import TourModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        #IntegrityError przy drugim koszyku tego samego usera leci do serwisu
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def increment_item(self, cart_id: int, tour_id: int) -> int:
        # UPDATE cart_items SET quantity = quantity + 1 WHERE cart_id = :c AND tour_id = :t
        # inkrementacja po stronie bazy, dwa rownolegle requesty nie nadpisza sobie wyniku
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.tour_id == tour_id,
            )
            .values(quantity=CartItemModel.quantity + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def insert_item(self, item: CartItemModel) -> None:
        self.db.add(item)
        self.db.flush()

    def get_item_state(self, cart_id: int, tour_id: int):
        #kolumny a nie obiekt, zeby nie dostac nieaktualnego quantity z identity map
        return self.db.execute(
            select(CartItemModel.id, CartItemModel.quantity).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.tour_id == tour_id,
            )
        ).one()

    def get_item_with_owner(self, item_id: int):
        return self.db.execute(
            select(CartItemModel, CartModel.user_id)
            .join(CartModel, CartItemModel.cart_id == CartModel.id)
            .where(CartItemModel.id == item_id)
        ).one_or_none()

    def delete_item(self, item: CartItemModel) -> None:
        self.db.delete(item)

    def get_cart_lines(self, cart_id: int):
        return self.db.execute(
            select(CartItemModel, TourModel)
            .join(TourModel, CartItemModel.tour_id == TourModel.id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.id)
            .execution_options(populate_existing=True)
        ).all()

    def delete_items_for_tour(self, tour_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.tour_id == tour_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
