import uvicorn

from agenda.settings import settings


uvicorn.run(
    "agenda.app:app", host=settings.host, port=settings.port, root_path=settings.root_path, reload=settings.reload
)
