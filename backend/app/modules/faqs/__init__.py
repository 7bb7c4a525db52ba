"""Frequently asked questions, published or hidden."""
