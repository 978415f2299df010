"""Role-based authorization: actions, rules and the permission evaluator."""
