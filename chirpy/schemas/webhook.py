# chirpy/schemas/webhook.py
from pydantic import BaseModel


class WebhookData(BaseModel):
    user_id: int = 0


class PolkaWebhook(BaseModel):
    event: str
    data: WebhookData = WebhookData()
