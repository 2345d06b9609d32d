"""API views for the notices application."""

from collections.abc import Mapping

from django.conf import settings

import structlog
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from notices.auth.context import set_current_user
from notices.auth.dismiss_token import DismissTokenAuthentication
from notices.auth.oauth2 import OAuth2Authentication
from notices.schemas.notice import ActiveNoticesResponse, DismissNoticeResponse
from notices.services.notice_dismissal_service import notice_dismissal_service
from notices.services.notice_registry import notice_registry
from notices.services.notice_renderer import notice_renderer
from notices.services.token_service import notice_token_service

logger = structlog.get_logger(__name__)


class NoticeAPIView(APIView):
    """Base view: bearer authentication plus the thread-local security context."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def initial(self, request, *args, **kwargs):
        """Run DRF authentication, then expose the user to the service layer."""
        super().initial(request, *args, **kwargs)
        set_current_user(request.user)


class DismissNoticeView(NoticeAPIView):
    """Persist a notice's dismissed flag.

    Accepts form-encoded or JSON bodies with ``action``, ``id``, ``meta``,
    ``time``, ``is_required`` and ``token``. Responses carry only
    ``{"success": bool}``; failures are rendered by the exception handler.

    Callers authenticate with a bearer token or, as the rendered client
    trigger does, with the dismissal token alone.
    """

    authentication_classes = (OAuth2Authentication, DismissTokenAuthentication)
    success_only_errors = True

    def post(self, request):
        """Handle a dismiss submission.

        Returns:
            200 {"success": true} when dismissed or when the notice is required
            400 {"success": false} when the id is missing or malformed
            401 {"success": false} when the caller is not authenticated
            403 {"success": false} when the security token is invalid
            500 {"success": false} when the flag store fails
        """
        data = request.data
        if hasattr(data, "dict"):
            payload = data.dict()
        elif isinstance(data, Mapping):
            payload = dict(data)
        else:
            payload = {}

        outcome = notice_dismissal_service.dismiss(
            payload, user_id=request.user.user_id
        )

        logger.info(
            "Notice dismiss request handled",
            outcome=outcome.value,
            user_id=request.user.user_id,
        )

        return Response(
            DismissNoticeResponse(success=True).model_dump(),
            status=status.HTTP_200_OK,
        )


class ActiveNoticesView(NoticeAPIView):
    """Render every registered notice the caller has not dismissed."""

    def get(self, request):
        """Return banner markup followed by the dismiss script.

        The script, carrying a fresh security token, is only included when
        at least one banner is rendered.
        """
        user_id = request.user.user_id

        banners = []
        for notice in notice_registry.all():
            markup = notice_renderer.render(notice, user_id=user_id)
            if markup:
                banners.append(markup)

        html = "".join(banners)
        if banners:
            html += notice_renderer.render_dismiss_script(
                token=notice_token_service.create_token(user_id),
                endpoint_url=settings.NOTICE_DISMISS_URL,
            )

        return Response(
            ActiveNoticesResponse(count=len(banners), html=html).model_dump(),
            status=status.HTTP_200_OK,
        )
