from sqlalchemy.orm import Session
from boutique.data.models.user import UserModel
from boutique.domain.errors import NotFoundError
from boutique.repos.user_repo import UserRepo
from boutique.domain.schemas import UserCreate, UserRead


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        email = payload.email.lower()
        if self.repo.get_by_email(email):
            raise ValueError("Un compte existe deja avec cet e-mail.")

        user = UserModel(
            email=email,
            name=payload.name,
            phone=payload.phone,
            address=payload.address,
            cart=[],
        )
        created = self.repo.create_user(user)
        return UserRead.model_validate(created)

    def get_user(self, email: str) -> UserRead:
        user = self.repo.get_by_email(email)
        if not user:
            raise NotFoundError("Compte introuvable")
        return UserRead.model_validate(user)
