"""OpenTripPlanner adapter."""

from hk_transit_optimizer.adapters.otp.otp_trip_planner import OtpTripPlanner

__all__ = ["OtpTripPlanner"]
