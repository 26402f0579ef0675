# live/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path("", views.entry, name="entry"),
    path("leaderboard/", views.leaderboard, name="leaderboard"),
    path("api/events/", views.event_collection, name="event_collection"),
    path("api/events/active/", views.active_event, name="active_event"),
    path("api/events/<int:event_id>/end/", views.end_event, name="end_event"),
    path("api/events/<int:event_id>/results/", views.add_result, name="add_result"),
    path("api/results/<int:result_id>/delete/", views.delete_result, name="delete_result"),
    path("api/leaderboard/", views.leaderboard_data, name="leaderboard_data"),
]
