"""Данные, поставляемые вместе с пакетом."""
