"""create users, words and questions tables

Revision ID: 3a7c9e21b4f0
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e21b4f0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    # Tables may already exist when adopting a database created outside Alembic
    if 'users' not in existing_tables:
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('number_of_correct_ans', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('time', sa.String(length=32), nullable=False, server_default='00:00:00'),
            sa.Column('rank', sa.Integer(), nullable=False, server_default='0'),
        )
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if 'words' not in existing_tables:
        op.create_table(
            'words',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('word', sa.String(length=128), nullable=False),
            sa.Column('content', sa.Text(), nullable=True),
        )
        op.create_index('ix_words_word', 'words', ['word'], unique=True)

    if 'questions' not in existing_tables:
        op.create_table(
            'questions',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('word', sa.String(length=128), nullable=False),
            sa.Column('correct', sa.String(length=255), nullable=False),
            sa.Column('options', sa.Text(), nullable=True),
        )
        op.create_index('ix_questions_word', 'questions', ['word'], unique=False)


def downgrade():
    op.drop_index('ix_questions_word', table_name='questions')
    op.drop_table('questions')
    op.drop_index('ix_words_word', table_name='words')
    op.drop_table('words')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
