from .create_transaction import CreateTransactionUseCase

__all__ = ["CreateTransactionUseCase"]
