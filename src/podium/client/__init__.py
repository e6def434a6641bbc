from podium.client.api import ApiError, PodiumApi

__all__ = ['ApiError', 'PodiumApi']
