# xc_meet/asgi.py
import os
from django.core.asgi import get_asgi_application
from channels.routing import ProtocolTypeRouter, URLRouter
from channels.auth import AuthMiddlewareStack

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "xc_meet.settings")

# First, initialize Django (this calls django.setup())
django_asgi_app = get_asgi_application()

# Now safe to import anything using models
import live.routing

application = ProtocolTypeRouter({
    "http": django_asgi_app,
    "websocket": AuthMiddlewareStack(
        URLRouter(live.routing.websocket_urlpatterns)
    ),
})
