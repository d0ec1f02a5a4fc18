from sqlalchemy.orm import declarative_base

Base = declarative_base()
import app.models.user
import app.models.alumni
import app.models.job_posting
