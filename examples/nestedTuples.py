# nestedTuples.py
#
# tuple (struct) arguments, tuple arrays, and the JSON-shaped description
# handed to an ABI encoder
#
from mo_logs import Log

from mo_signature import parse_signature

order = parse_signature(
    "fulfillOrders(((address,uint256)[],bytes32) orders,(uint8,bytes32,bytes32)[] sigs,address)"
)

description = order.__data__()

Log.note("{{name}} has {{num}} inputs", name=order.name, num=len(order.inputs))
for i in order.inputs:
    Log.note("  {{name}}: {{type}} {{canonical}}", name=i.name, type=i.type, canonical=i.canonical)
