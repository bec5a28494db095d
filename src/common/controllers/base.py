import typing as t

from ninja_extra import ControllerBase

from accounts.models import EwmUser


class UserAwareController(ControllerBase):
    def user(self) -> EwmUser:
        """Get the user for this request."""
        return t.cast(EwmUser, self.context.request.user)  # type: ignore[union-attr]

    def client_ip(self) -> str:
        """Best-effort client address, honouring a single reverse proxy hop."""
        request = self.context.request  # type: ignore[union-attr]
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
        if forwarded:
            return str(forwarded.split(",")[0].strip())
        return str(request.META.get("REMOTE_ADDR", ""))
