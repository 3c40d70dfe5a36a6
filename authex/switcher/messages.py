import inspect

from authex.logging.logger import AuthexLogger
from authex.switcher.enums import SwitchErrorKind
from authex.switcher.interfaces import NotificationSink
from authex.switcher.schemas import SwitchResult

logger = AuthexLogger("Notifications")


def skipped_message(result: SwitchResult) -> str:
    return f"⚠️ Account switch skipped: {result.reason}"


def success_message(result: SwitchResult) -> str:
    if result.final_attempt:
        return (
            f"🔄 All other accounts failed, recovered on original account "
            f"#{result.new_index}."
        )
    if result.failed_accounts:
        failed = ", ".join(str(index) for index in result.failed_accounts)
        return (
            f"🔄 Switched to account #{result.new_index} "
            f"after skipping failed accounts: [{failed}]."
        )
    return f"🔄 Switched to account #{result.new_index}."


def failure_message(error: Exception, current_index: int | None) -> str:
    """Map a failed switch to the message shown to the user."""
    kind = getattr(error, "kind", None)
    match kind:
        case SwitchErrorKind.SINGLE_CANDIDATE_FAILURE:
            return "❌ Switch failed: Only one account available."
        case SwitchErrorKind.ALL_CANDIDATES_FAILED:
            return (
                "❌ Fatal error: Both automatic switching and emergency fallback "
                "failed, service may be interrupted, please check logs!"
            )
        case SwitchErrorKind.FALLBACK_RECOVERED:
            return (
                f"⚠️ Automatic switch failed: Automatically fell back to account "
                f"#{current_index}, please check if target account has issues."
            )
        case _:
            return f"❌ Fatal error: Unknown switching error occurred: {error}"


async def send(sink: NotificationSink | None, message: str) -> None:
    """
    Deliver ``message`` to ``sink`` if there is one.

    Coroutine sinks are awaited. Sink errors are logged only.
    """
    if sink is None:
        return
    try:
        outcome = sink(message)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as e:
        logger.error(f"Notification sink failed: {e}")
