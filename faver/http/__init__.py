"""faver.http: общий HTTP-клиент и модели ответов."""

from .client import HttpClient
from .models import FetchedResource

__all__ = ["HttpClient", "FetchedResource"]
