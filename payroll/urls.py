from django.urls import path

from .views import calculate_pay, job_list

urlpatterns = [
    path("calculate/", calculate_pay, name="pay-calculate"),
    path("jobs/", job_list, name="pay-jobs"),
]
