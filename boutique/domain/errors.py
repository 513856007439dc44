# boutique/domain/errors.py


class NotFoundError(LookupError):
    """Ligne absente (produit, categorie, commande, compte...)."""


class CooldownActiveError(RuntimeError):
    """Ajout repete pendant la fenetre anti double-clic."""
