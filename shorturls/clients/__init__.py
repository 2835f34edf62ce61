"""Clients for services outside the shortener."""

from shorturls.clients.evaluation import EvaluationServiceClient

__all__ = ["EvaluationServiceClient"]
