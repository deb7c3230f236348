"""Tests for whole-document Scala generation."""

import pytest

from gql_scalagen.core.config import WriterConfig
from gql_scalagen.core.errors import DuplicateDeclarationError, UnknownTypeError
from gql_scalagen.core.ir import IRSchema
from gql_scalagen.core.parser import parse_schema
from gql_scalagen.core.writer import (
    ANNOTATIONS_IMPORT,
    EMPTY_DOCUMENT,
    STREAM_IMPORT,
    TYPES_IMPORT,
    SchemaWriter,
    resolve_root_types,
    write,
)

POSTS_SCHEMA = """
  type Subscription {
    postAdded: Post
  }
  type Query {
    posts: [Post]
  }
  type Mutation {
    addPost(author: String, comment: String): Post
  }
  type Post {
    author: String
    comment: String
  }
"""

ROLE_SCHEMA = '''
  "role"
  union Role = Captain | Pilot

  type Captain {
    "ship" shipName: String!
  }

  type Pilot {
    shipName: String!
  }
'''


# =============================================================================
# Tests: Full documents
# =============================================================================


class TestWriteDocument:

    def test_types_and_operations(self, gen):
        assert gen(POSTS_SCHEMA) == (
            "import Types._\n"
            "import zio.stream.ZStream\n"
            "\n"
            "object Types {\n"
            "\n"
            "case class AddPostArgs(author: Option[String], comment: Option[String])\n"
            "case class Post(author: Option[String], comment: Option[String])\n"
            "\n"
            "}\n"
            "\n"
            "object Operations {\n"
            "\n"
            "case class Query(\n"
            "posts: zio.UIO[Option[List[Option[Post]]]]\n"
            ")\n"
            "\n"
            "case class Mutation(\n"
            "addPost: AddPostArgs => zio.UIO[Option[Post]]\n"
            ")\n"
            "\n"
            "case class Subscription(\n"
            "postAdded: ZStream[Any, Nothing, Option[Post]]\n"
            ")\n"
            "\n"
            "}\n"
        )

    def test_enum_only(self, gen):
        schema = """
          enum Origin {
            EARTH
            MARS
            BELT
          }
        """
        assert gen(schema) == (
            "object Types {\n"
            "\n"
            "sealed trait Origin extends scala.Product with scala.Serializable\n"
            "\n"
            "object Origin {\n"
            "case object EARTH extends Origin\n"
            "case object MARS extends Origin\n"
            "case object BELT extends Origin\n"
            "}\n"
            "\n"
            "}\n"
        )

    def test_union(self, gen, squash):
        expected = '''
          import caliban.schema.Annotations._

          object Types {
            @GQLDescription("role")
            sealed trait Role extends scala.Product with scala.Serializable

            object Role {
              case class Captain(
                @GQLDescription("ship")
                shipName: String
              ) extends Role
              case class Pilot(shipName: String) extends Role
            }
          }
        '''
        assert squash(gen(ROLE_SCHEMA)) == squash(expected)

    def test_annotation_import_once(self, gen):
        out = gen(ROLE_SCHEMA)
        assert out.count(ANNOTATIONS_IMPORT) == 1
        assert out.startswith(ANNOTATIONS_IMPORT)

    def test_no_annotation_import_without_descriptions(self, gen):
        assert ANNOTATIONS_IMPORT not in gen(POSTS_SCHEMA)

    def test_explicit_schema_definition(self, gen):
        schema = """
          schema {
            query: Queries
          }

          type Queries {
            characters: Int!
          }
        """
        assert gen(schema) == (
            "object Operations {\n"
            "\n"
            "case class Queries(\n"
            "characters: zio.UIO[Int]\n"
            ")\n"
            "\n"
            "}\n"
        )

    def test_input_type(self, gen, squash):
        schema = """
          type Character {
            name: String!
          }

          input CharacterArgs {
            name: String!
          }
        """
        expected = """
          object Types {
            case class Character(name: String)
            case class CharacterArgs(name: String)
          }
        """
        assert squash(gen(schema)) == squash(expected)

    def test_reserved_words(self, gen, squash):
        schema = """
          type Character {
            private: String!
            object: String!
            type: String!
          }
        """
        expected = """
          object Types {
            case class Character(`private`: String, `object`: String, `type`: String)
          }
        """
        assert squash(gen(schema)) == squash(expected)

    def test_user_query_with_custom_effect(self, gen, squash):
        out = squash(gen("type Query { user(id: Int): User } type User { id: Int }", effect="W"))
        assert squash("user: UserArgs => W[Option[User]]") in out
        assert squash("case class UserArgs(id: Option[Int])") in out
        assert squash("case class User(id: Option[Int])") in out
        # Args records come first, in declaration order
        assert out.index("UserArgs(") < out.index("class User(")

    def test_field_order_preserved(self, gen):
        out = gen("type T { b: Int a: Int c: Int }")
        assert "case class T(b: Option[Int], a: Option[Int], c: Option[Int])" in out

    def test_declaration_order(self, gen):
        out = gen("enum Z { A } type Y { id: Int } input X { id: Int } union W = V type V { id: Int }")
        positions = [out.index(s) for s in ("trait Z", "class Y(", "class X(", "trait W")]
        assert positions == sorted(positions)


class TestEmptyDocument:

    def test_empty_text(self, gen):
        assert gen("") == EMPTY_DOCUMENT

    def test_empty_schema(self, writer):
        assert writer.write(IRSchema()) == "\n"

    def test_only_unsupported_definitions(self, gen):
        assert gen("scalar DateTime\ninterface Node { id: ID! }") == "\n"


class TestGroups:

    def test_operations_only_has_no_types_import(self, gen):
        out = gen("type Query { version: String! }")
        assert TYPES_IMPORT not in out
        assert "object Types" not in out
        assert "object Operations" in out

    def test_types_only_has_no_operations(self, gen):
        out = gen("type User { id: Int }")
        assert "object Operations" not in out
        assert TYPES_IMPORT not in out

    def test_root_argument_records_create_types_group(self, gen, squash):
        out = gen("type Query { echo(text: String!): String! }")
        assert TYPES_IMPORT in out
        assert squash("object Types { case class EchoArgs(text: String) }") in squash(out)

    def test_stream_import_only_with_subscription(self, gen):
        assert STREAM_IMPORT not in gen("type Query { a: Int }")
        assert STREAM_IMPORT in gen("type Subscription { a: Int }")

    def test_import_order(self, gen):
        out = gen(ROLE_SCHEMA + "type Subscription { roles: [Role!]! }")
        lines = out.splitlines()
        assert lines[:3] == [TYPES_IMPORT, ANNOTATIONS_IMPORT, STREAM_IMPORT]

    def test_package_name(self):
        writer = SchemaWriter(WriterConfig(package_name="com.example.api"))
        out = writer.write(parse_schema("type User { id: Int }"))
        assert out.startswith("package com.example.api\n\n")

    def test_package_not_added_to_empty_document(self):
        writer = SchemaWriter(WriterConfig(package_name="com.example.api"))
        assert writer.write(IRSchema()) == "\n"


# =============================================================================
# Tests: Root resolution
# =============================================================================


class TestRootResolution:

    def test_default_names(self):
        roots = resolve_root_types(parse_schema(POSTS_SCHEMA))
        assert roots.names == {"Query", "Mutation", "Subscription"}

    def test_missing_defaults_skipped(self):
        roots = resolve_root_types(parse_schema("type Query { a: Int }"))
        assert roots.mutation is None
        assert roots.subscription is None

    def test_explicit_name_falls_back_for_others(self):
        schema = parse_schema("""
          schema { query: Root }
          type Root { a: Int }
          type Mutation { b: Int }
        """)
        roots = resolve_root_types(schema)
        assert roots.query.name == "Root"
        assert roots.mutation.name == "Mutation"

    def test_explicit_name_must_exist(self, gen):
        with pytest.raises(UnknownTypeError) as exc_info:
            gen("schema { query: Missing } type Query { a: Int }")
        assert exc_info.value.type_name == "Missing"

    def test_renamed_root_not_in_types(self, gen):
        out = gen("schema { mutation: Commands } type Commands { run: Boolean } type Query { a: Int }")
        assert "case class Commands(\nrun: zio.UIO[Option[Boolean]]\n)" in out
        assert "object Types" not in out

    def test_default_named_type_is_data_when_renamed(self, gen):
        out = gen("schema { query: Root } type Root { q: Query } type Query { a: Int }")
        assert "case class Query(a: Option[Int])" in out


# =============================================================================
# Tests: Arguments and collisions
# =============================================================================


class TestArgumentRecords:

    def test_args_record_emitted_once_per_field(self, gen):
        out = gen("type Hero { name(pad: Int!): String! nick: String! bday: Int }")
        assert out.count("case class NameArgs(") == 1
        assert "case class Hero(name: NameArgs => String, nick: String, bday: Option[Int])" in out

    def test_no_args_record_without_arguments(self, gen):
        assert "Args" not in gen("type Hero { nick: String! }")

    def test_identical_records_deduplicated(self, gen):
        out = gen("""
          type Query { user(id: Int): User }
          type Mutation { user(id: Int): User }
          type User { id: Int }
        """)
        assert out.count("case class UserArgs(") == 1

    def test_conflicting_records_rejected(self, gen):
        with pytest.raises(DuplicateDeclarationError) as exc_info:
            gen("""
              type Query { user(id: Int): User }
              type Mutation { user(name: String): User }
              type User { id: Int }
            """)
        assert exc_info.value.name == "UserArgs"

    def test_record_clashing_with_declared_type(self, gen):
        with pytest.raises(DuplicateDeclarationError):
            gen("""
              type Query { character(id: Int): String }
              input CharacterArgs { name: String! }
            """)

    def test_union_member_arguments(self, gen):
        out = gen("""
          union Crew = Captain
          type Captain { ships(first: Int): [String!]! }
        """)
        assert out.count("case class ShipsArgs(first: Option[Int])") == 1
        assert "case class Captain(ships: ShipsArgs => List[String]) extends Crew" in out

    def test_union_members_only_declared_as_variants(self, gen):
        out = gen(ROLE_SCHEMA)
        assert out.count("case class Captain(") == 1
        assert out.count("case class Pilot(") == 1
        assert out.count('@GQLDescription("ship")') == 1

    def test_object_outside_union_still_declared(self, gen):
        out = gen(ROLE_SCHEMA + "type Planet { name: String }")
        assert "case class Planet(name: Option[String])" in out
        assert out.index("object Role {") < out.index("case class Planet(")

    def test_unknown_union_member(self, gen):
        with pytest.raises(UnknownTypeError) as exc_info:
            gen("union Role = Captain | Ghost type Captain { a: Int }")
        assert exc_info.value.type_name == "Ghost"


# =============================================================================
# Tests: Configuration and entry points
# =============================================================================


class TestWriterConfiguration:

    def test_deterministic(self, gen):
        assert gen(POSTS_SCHEMA + ROLE_SCHEMA) == gen(POSTS_SCHEMA + ROLE_SCHEMA)

    def test_config_effect(self):
        writer = SchemaWriter(WriterConfig(effect="zio.Task"))
        out = writer.write(parse_schema("type Query { a: Int! }"))
        assert "a: zio.Task[Int]" in out

    def test_effect_argument_overrides_config(self):
        writer = SchemaWriter(WriterConfig(effect="zio.Task"))
        out = writer.write(parse_schema("type Query { a: Int! }"), "cats.effect.IO")
        assert "a: cats.effect.IO[Int]" in out

    def test_scalar_mappings(self):
        writer = SchemaWriter(WriterConfig(scalar_mappings={"DateTime": "java.time.OffsetDateTime"}))
        out = writer.write(parse_schema("type Event { at: DateTime! }"))
        assert "case class Event(at: java.time.OffsetDateTime)" in out

    def test_module_level_write(self):
        assert "zio.UIO[Int]" in write(parse_schema("type Query { a: Int! }"))


class TestEntryPoints:

    @pytest.fixture
    def schema(self):
        return parse_schema("""
          type Hero { name(pad: Int!): String! nick: String! }
          type Query { user(id: Int): String userList: [String]! }
          type Subscription { UserWatch(id: Int!): String! }
          enum Origin { EARTH }
          input Filter { q: String }
          union Any = Hero
        """)

    def test_write_object(self, writer, schema):
        hero = schema.get_object_type("Hero")
        assert writer.write_object(hero) == "case class Hero(name: NameArgs => String, nick: String)"

    def test_write_arguments(self, writer, schema):
        name, nick = schema.get_object_type("Hero").fields
        assert writer.write_arguments(name) == "case class NameArgs(pad: Int)"
        assert writer.write_arguments(nick) == ""

    def test_write_root_query(self, writer, schema):
        out = writer.write_root_query_or_mutation_def(schema.get_object_type("Query"), "zio.UIO")
        assert out == (
            "case class Query(\n"
            "user: UserArgs => zio.UIO[Option[String]],\n"
            "userList: zio.UIO[List[Option[String]]]\n"
            ")"
        )

    def test_write_root_subscription(self, writer, schema):
        out = writer.write_root_subscription_def(schema.get_object_type("Subscription"))
        assert out == (
            "case class Subscription(\n"
            "UserWatch: UserWatchArgs => ZStream[Any, Nothing, String]\n"
            ")"
        )

    def test_write_enum_input_union(self, writer, schema):
        assert writer.write_enum(schema.enums["Origin"]).startswith("sealed trait Origin")
        assert writer.write_input_object(schema.input_types["Filter"]) == (
            "case class Filter(q: Option[String])"
        )
        assert "case class Hero(name: NameArgs => String, nick: String) extends Any" in (
            writer.write_union(schema.unions["Any"], schema)
        )
