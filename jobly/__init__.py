"""
Jobly: job-board backend with companies and jobs stored in PostgreSQL.
"""
