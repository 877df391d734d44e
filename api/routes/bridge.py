"""Outgoing-webhook ingress endpoint.

Slack posts every message of a linked channel here as a form. The endpoint
answers 200 with an empty body straight away, whatever happens next: a JSON
body with ``text`` would be posted back into the channel by Slack, and
relay failures are never reported to the poster. Verification and
forwarding run as a background task after the response.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Form, Response, status

from api.dependencies import RelayDep
from models.channel import Channel
from models.message import RelayMessage
from models.relay import Relay, RelayOutcome

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["bridge"],
)


def relay_message(relay: Relay, message: RelayMessage, token: str) -> None:
    """Run the relay for one message outside the request cycle."""
    try:
        outcome, result = relay.handle(message, token)
    except Exception:
        logger.exception(f"Relaying message from {message.channel} failed")
        return

    if outcome is RelayOutcome.FORWARDED and result is not None and result.failed:
        logger.warning(
            f"Message from {message.channel} could not reach "
            f"{', '.join(str(peer) for peer in result.failed)}"
        )


@router.post("/bridge", status_code=status.HTTP_200_OK, response_class=Response)
async def bridge(
    relay: RelayDep,
    background_tasks: BackgroundTasks,
    team_id: str = Form(default=""),
    channel_id: str = Form(default=""),
    user_name: str = Form(default=""),
    text: str = Form(default=""),
    token: str = Form(default=""),
    user_id: str | None = Form(default=None),
):
    """Accept a message from a Slack outgoing webhook.

    Returns:
        An empty 200 response.
    """
    message = RelayMessage(
        channel=Channel(team_id=team_id, channel_id=channel_id),
        username=user_name,
        text=text,
        user_id=user_id or None,
    )
    background_tasks.add_task(relay_message, relay, message, token)
    return Response(status_code=status.HTTP_200_OK)
