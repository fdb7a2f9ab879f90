from __future__ import annotations

import errno as _errno


def is_device_missing(exc: Exception) -> bool:
    """Best-effort check for an absent device node.

    The acer-gkbbl nodes only exist while the kernel module is loaded, so a
    missing module surfaces as ENOENT/ENODEV on open or write.
    """

    if isinstance(exc, FileNotFoundError):
        return True

    errno = getattr(exc, "errno", None)
    if errno in (_errno.ENOENT, _errno.ENODEV, _errno.ENXIO):
        return True

    try:
        msg = str(exc)
    except Exception:
        return False

    return "No such device" in msg or "No such file or directory" in msg


def is_permission_denied(exc: Exception) -> bool:
    """Best-effort check for permission/authorization failures.

    Used to detect when device writes fail due to missing udev rules or a
    non-root user. Transports may raise PermissionError, OSError with errno, or
    wrap errors with a descriptive message.
    """

    if isinstance(exc, PermissionError):
        return True

    errno = getattr(exc, "errno", None)
    if errno in (_errno.EPERM, _errno.EACCES):
        return True

    try:
        msg = str(exc).lower()
    except Exception:
        return False

    return "permission denied" in msg or "access denied" in msg or "not permitted" in msg
