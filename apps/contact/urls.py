from django.urls import path
from . import views

app_name = 'contact'

urlpatterns = [
    # POST /api/contact/ - Submit contact form
    path('', views.ContactView.as_view(), name='contact-submit'),
]
