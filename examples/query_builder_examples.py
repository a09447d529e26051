"""
Examples demonstrating the fluent query builder.

Each function builds a few statements and prints the resulting SQL.
"""

from fluentquery import PaginationMode, PaginationParams, QueryBuilder


def basic_examples():
    """Basic query building examples."""
    print("=== Basic Query Examples ===\n")

    sql = QueryBuilder().select("Id,Name,Email").from_("Users").build()
    print(f"Simple SELECT:\n{sql}\n")

    sql = QueryBuilder().select(["Id", "Name"]).from_("Users").where("Active = 1").build()
    print(f"SELECT with WHERE:\n{sql}\n")

    sql = QueryBuilder().select_count_all().from_("Users").build()
    print(f"SELECT COUNT(*):\n{sql}\n")


def join_examples():
    """JOIN query examples."""
    print("=== JOIN Examples ===\n")

    sql = (QueryBuilder()
           .select("U.Name,P.Title,P.CreatedAt")
           .from_("Users U")
           .left_join("Posts P", "U.Id = P.UserId")
           .where("U.Active = 1")
           .order_by("P.CreatedAt DESC")
           .build())
    print(f"LEFT JOIN with ORDER BY:\n{sql}\n")

    sql = (QueryBuilder()
           .select("U.Name,P.Title,C.Content")
           .from_("Users U")
           .inner_join("Posts P", "U.Id = P.UserId")
           .full_outer_join("Comments C", "P.Id = C.PostId")
           .build())
    print(f"Multiple JOINs:\n{sql}\n")


def filter_examples(only_admins: bool = False, name_filter: str = ""):
    """Predicate composition examples."""
    print("=== Filter Examples ===\n")

    sql = (QueryBuilder()
           .select("Id,Name")
           .from_("Users")
           .where("Active = 1")
           .and_("Age >= 18", lambda g: g.or_("GuardianId IS NOT NULL"))
           .or_("Role = 'staff'")
           .build())
    print(f"Grouped predicates:\n{sql}\n")

    # Conditional predicates are skipped entirely when their flag is false
    sql = (QueryBuilder()
           .select("Id,Name")
           .from_("Users")
           .where("Active = 1")
           .and_if("Role = 'admin'", only_admins)
           .and_if(f"Name LIKE '{name_filter}%'", bool(name_filter))
           .build())
    print(f"Conditional predicates:\n{sql}\n")


def aggregate_examples():
    """GROUP BY and ORDER BY examples."""
    print("=== Aggregate Examples ===\n")

    sql = (QueryBuilder()
           .select("Department,COUNT(*)")
           .from_("Employees")
           .where("HiredAt >= '2020-01-01'")
           .group_by("Department")
           .order_by(["Department"])
           .build())
    print(f"GROUP BY after WHERE:\n{sql}\n")

    sql = (QueryBuilder()
           .select_count("Id")
           .from_("Employees")
           .group_by("Department")
           .prepend_select("Department")
           .build())
    print(f"Prepended select field:\n{sql}\n")


def pagination_examples():
    """Pagination examples."""
    print("=== Pagination Examples ===\n")

    sql = (QueryBuilder()
           .select("Id,Name")
           .from_("Users")
           .order_by("Name")
           .paginated(20, 3)
           .build())
    print(f"OFFSET/FETCH:\n{sql}\n")

    sql = (QueryBuilder()
           .select("Id,Name")
           .from_("Users")
           .where("Active = 1")
           .paginated_by_dense_rank(20, 3, "Name")
           .build())
    print(f"DENSE_RANK derived table:\n{sql}\n")

    params = PaginationParams(page_size=10, current_page=2, mode=PaginationMode.DENSE_RANK, rank_field="Id")
    sql = QueryBuilder().select("Id,Name").from_("Users").paginate(params).build()
    print(f"From PaginationParams:\n{sql}\n")


def hint_examples():
    """Table and query hint examples."""
    print("=== Hint Examples ===\n")

    sql = (QueryBuilder()
           .select("U.Id")
           .from_("Users U").with_("NOLOCK", "INDEX(IX_Users_Name)")
           .where("U.Name = 'x'")
           .option("RECOMPILE")
           .build())
    print(f"WITH and OPTION hints:\n{sql}\n")


def main():
    """Run all examples."""
    print("Fluent Query Builder Examples")
    print("=" * 50)
    print()

    basic_examples()
    join_examples()
    filter_examples(only_admins=True, name_filter="Jo")
    aggregate_examples()
    pagination_examples()
    hint_examples()

    print("=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    main()
