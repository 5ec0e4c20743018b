"""FastAPI app initialization, exception handling"""

from fastapi import FastAPI

from tagstore.config import Config, get_config
from tagstore.errors.handler import register_exception_handlers
from tagstore.routes.tag import tag_router

config: Config = get_config()
app = FastAPI(title=config.app_name, version=config.app_version)

register_exception_handlers(app)

app.include_router(tag_router)
