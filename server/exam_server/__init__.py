"""Online exam server: submissions, statistics and question bank."""
