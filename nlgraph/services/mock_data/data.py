"""Fixed sample data served by the mock data service."""

TYPE_DEFS = """
type Query {
  "A list of sample users"
  users: [User!]!
  "Sample sales data by category"
  salesByCategory: [CategorySales!]!
  "Sample user signups over time"
  signupsOverTime: [TimePoint!]!
  "Sample distribution of user statuses"
  userStatusDistribution: [StatusCount!]!
}

type User {
  id: ID!
  name: String!
  email: String
}

type CategorySales {
  category: String!
  sales: Int!
}

type TimePoint {
  "ISO date (YYYY-MM-DD)"
  date: String!
  count: Int!
}

type StatusCount {
  status: String!
  count: Int!
}
"""

MOCK_USERS = [
    {"id": "1", "name": "Alice Wonderland", "email": "alice@example.com"},
    {"id": "2", "name": "Bob The Builder", "email": "bob@example.com"},
    {"id": "3", "name": "Charlie Chaplin", "email": None},
]

MOCK_SALES = [
    {"category": "Electronics", "sales": 1500},
    {"category": "Clothing", "sales": 800},
    {"category": "Groceries", "sales": 1200},
    {"category": "Books", "sales": 350},
]

MOCK_SIGNUPS = [
    {"date": "2023-10-01", "count": 5},
    {"date": "2023-10-02", "count": 8},
    {"date": "2023-10-03", "count": 6},
    {"date": "2023-10-04", "count": 10},
    {"date": "2023-10-05", "count": 12},
]

MOCK_STATUSES = [
    {"status": "Active", "count": 55},
    {"status": "Inactive", "count": 20},
    {"status": "Pending", "count": 15},
]
