# chirpy/api/routes/admin.py
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy.api.deps import get_ctx
from chirpy.core.context import AppContext

router = APIRouter()

METRICS_HTML = """
<html>

<body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
</body>

</html>
"""

@router.get("/admin/metrics", response_class=HTMLResponse)
def admin_metrics(ctx: AppContext = Depends(get_ctx)):
    return METRICS_HTML.format(hits=ctx.hits.value)

@router.api_route("/api/reset", methods=["GET", "POST"], response_class=PlainTextResponse)
def reset_metrics(ctx: AppContext = Depends(get_ctx)):
    ctx.hits.reset()
    return ""
