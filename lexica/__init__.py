from lexica.index import Index

__all__ = ['Index']
