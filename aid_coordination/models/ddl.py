"""Schema DDL shared by the models: enumerated CHECK constraints and updated_at maintenance.

The ORM sets updated_at through onupdate on the columns. When the store is PostgreSQL the schema also carries the
update_modified_column() trigger function so that updates made outside the API keep the column current.
"""
from sqlalchemy import DDL
from sqlalchemy import event

from aid_coordination.flask_essentials import database

UPDATE_MODIFIED_COLUMN_FUNCTION = DDL( """
CREATE OR REPLACE FUNCTION update_modified_column()
RETURNS TRIGGER AS $$
BEGIN
   NEW.updated_at = now();
   RETURN NEW;
END;
$$ language 'plpgsql'
""" )

event.listen(
    database.metadata, 'before_create', UPDATE_MODIFIED_COLUMN_FUNCTION.execute_if( dialect='postgresql' )
)


def attach_modified_trigger( table ):
    """Create the BEFORE UPDATE trigger for the table after it is created on PostgreSQL.

    :param table: The SQLAlchemy Table with an updated_at column.
    :return:
    """

    trigger = DDL(
        'CREATE TRIGGER update_{table}_modtime BEFORE UPDATE ON {table} '
        'FOR EACH ROW EXECUTE PROCEDURE update_modified_column()'.format( table=table.name )
    )
    event.listen( table, 'after_create', trigger.execute_if( dialect='postgresql' ) )


def check_in( column, values, name ):
    """Build the CHECK constraint restricting a column to an enumerated value set.

    :param str column: The column name.
    :param tuple values: The allowed values.
    :param str name: The constraint name.
    :return: A CheckConstraint.
    """

    allowed = ', '.join( "'{}'".format( value ) for value in values )
    return database.CheckConstraint( '{} IN ({})'.format( column, allowed ), name=name )
