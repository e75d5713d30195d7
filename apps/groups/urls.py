from django.urls import path
from . import views

app_name = 'groups'

urlpatterns = [
    # GET    /api/groups/{group_id}/  - Get group (filtered for ?member=)
    # POST   /api/groups/{group_id}/  - Create or overwrite group
    # DELETE /api/groups/{group_id}/  - Delete group (creator)
    path('<str:group_id>/', views.GroupDocumentView.as_view(), name='group-detail'),
]
