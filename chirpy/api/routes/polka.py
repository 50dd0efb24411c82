# chirpy/api/routes/polka.py
from fastapi import APIRouter, Depends, Response

from chirpy.api.deps import get_ctx, require_polka_key
from chirpy.core.context import AppContext
from chirpy.schemas.webhook import PolkaWebhook

router = APIRouter()

@router.post("/webhooks", status_code=204, dependencies=[Depends(require_polka_key)])
def polka_webhook(body: PolkaWebhook, ctx: AppContext = Depends(get_ctx)):
    # eventos desconhecidos também respondem 204, sem mudar estado
    ctx.identity.handle_webhook(body.event, body.data.user_id)
    return Response(status_code=204)
