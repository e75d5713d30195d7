from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('login/', views.AdminLoginView.as_view(), name='login'),
    path('logout/', views.AdminLogoutView.as_view(), name='logout'),
    path('stats/', views.SystemStatsView.as_view(), name='stats'),

    # Groups
    path('groups/', views.GroupOverviewListView.as_view(), name='group-list'),
    path('groups/<str:group_id>/', views.GroupObserveView.as_view(), name='group-detail'),

    # Contact inbox
    path('contacts/', views.ContactListView.as_view(), name='contact-list'),
    path('contacts/<int:contact_id>/', views.ContactUpdateView.as_view(), name='contact-detail'),

    path('cleanup/', views.CleanupView.as_view(), name='cleanup'),
]
