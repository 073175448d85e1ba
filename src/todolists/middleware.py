import logging

from django.http import HttpRequest, HttpResponseRedirect
from django.urls import reverse
from django.utils.functional import cached_property
from asgiref.sync import iscoroutinefunction, markcoroutinefunction

from .conf import get_setting
from .exceptions import NotFoundError, TodoNotFound
from .flash import set_error
from .storage import SessionPersistence

logger = logging.getLogger(__name__)


class TodoListsHttpRequest(HttpRequest):
    """Dummy HttpRequest subclass, only used for type hints.

    After TodoListsMiddleware ran, each request has a `todolists` and a `storage`
    attribute.
    """

    todolists: "TodoListsDetails"
    storage: SessionPersistence


class TodoListsDetails:
    def __init__(self, request: HttpRequest) -> None:
        self.request = request

    def _get_header_value(self, name: str) -> str | None:
        return self.request.headers.get(name) or None

    def __bool__(self) -> bool:
        """Returns True if the request was sent by a script (async-requested)."""
        return self.is_async

    @cached_property
    def is_async(self) -> bool:
        return self._get_header_value(
            get_setting("TODOLISTS_ASYNC_HEADER")
        ) == get_setting("TODOLISTS_ASYNC_HEADER_VALUE")


class TodoListsMiddleware:
    """Gives each request access to the lists of its session.

    Must be placed after django's SessionMiddleware. Lookups of unknown lists or
    todos inside views end up here and are turned into a redirect to a page that
    exists, with an error message for the user.
    """

    async_capable = True
    sync_capable = True

    def __init__(self, get_response):
        self.get_response = get_response
        self._is_async = iscoroutinefunction(self.get_response)
        if self._is_async:
            markcoroutinefunction(self)

    def __call__(self, request):
        if self._is_async:
            return self.__acall__(request)
        else:
            return self._sync_call(request)

    async def __acall__(self, request):
        self._prepare_request(request)
        return await self.get_response(request)

    def _sync_call(self, request):
        self._prepare_request(request)
        return self.get_response(request)

    @staticmethod
    def _prepare_request(request) -> None:
        request.todolists = TodoListsDetails(request)
        request.storage = SessionPersistence(request.session)

    def process_exception(self, request, exception):
        if not isinstance(exception, NotFoundError):
            return None

        logger.warning(f"{exception} ({request.method} {request.path})")
        set_error(request, exception.message)
        if isinstance(exception, TodoNotFound):
            return HttpResponseRedirect(
                reverse("todolists:list", args=[exception.list_id])
            )
        return HttpResponseRedirect(reverse("todolists:lists"))
