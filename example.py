from sql_weave import Builder, Columns, OnelineBuilder


def get_orders(query):
    q = OnelineBuilder()
    q("SELECT %s FROM orders WHERE TRUE", Columns(["id", "event_id", "start_time"]))

    if "id" in query:
        q("AND id = %$", query["id"])
    if "eventIds" in query:
        q("AND event_id IN (%+$)", query["eventIds"])
    if "from" in query:
        q("AND start_time >= %$", query["from"])
    if "until" in query:
        q("AND start_time < %$", query["until"])
    if "limit" in query:
        q("LIMIT %d", query["limit"])

    return q


print(get_orders({}).build())
# ('SELECT id, event_id, start_time FROM orders WHERE TRUE', [])

print(get_orders({"id": "xyzzy"}).build())
# ('SELECT id, event_id, start_time FROM orders WHERE TRUE AND id = $1', ['xyzzy'])

orders = get_orders(
    {"eventIds": ["plugh", "xyzzy"], "from": "2019-05-01", "until": "2019-08-26", "limit": 50}
)
print(orders.build())
# ('SELECT id, event_id, start_time FROM orders WHERE TRUE AND event_id IN ($1, $2) AND start_time >= $3 AND start_time < $4 LIMIT 50', ['plugh', 'xyzzy', '2019-05-01', '2019-08-26'])

print(orders.debug_build())
# SELECT id, event_id, start_time FROM orders WHERE TRUE AND event_id IN ('plugh', 'xyzzy') AND start_time >= '2019-05-01' AND start_time < '2019-08-26' LIMIT 50


insert = Builder()
insert("INSERT INTO orders (%s)", Columns(["id", "event_id"]))
insert("VALUES %#$", [("a", "plugh"), ("b", "xyzzy")])
insert("RETURNING id")
print(insert.build())
# ('INSERT INTO orders (id, event_id)\nVALUES ($1, $2), ($3, $4)\nRETURNING id', ['a', 'plugh', 'b', 'xyzzy'])
