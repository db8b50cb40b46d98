from .create import create_item as create
from .read import read_items as read, read_item
from .update import update_item as update
from .delete import delete_item as delete
from .filter import filter_items as filter, parse_criteria
from .params import PathId
