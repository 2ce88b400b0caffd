from django.urls import path

from .views import CustomerRewardView, PointsView, RewardListView

app_name = "rewardman"

urlpatterns = [
    path("rewards/", RewardListView.as_view(), name="reward-list"),
    path("rewards/points/", PointsView.as_view(), name="reward-points"),
    path("rewards/<str:customer_id>/", CustomerRewardView.as_view(), name="customer-reward"),
]
