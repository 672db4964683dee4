"""Bistro ordering API."""
