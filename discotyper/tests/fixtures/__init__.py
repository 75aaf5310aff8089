"""Test fixtures for discotyper tests.

This module provides sample Discovery documents, a directory listing and the
exact output expected for the smallest of them.
"""

from discotyper.codegen.writer import StringEmitter, TypescriptWriter
from discotyper.discovery.models import RestDescription

# Smallest useful API: one schema, one empty schema, one resource
TINY_API = {
    'kind': 'discovery#restDescription',
    'id': 'tiny:v1',
    'name': 'tiny',
    'version': 'v1',
    'title': 'Tiny API',
    'ownerName': 'Google',
    'documentationLink': 'https://tiny.example.com',
    'parameters': {
        'key': {'type': 'string', 'description': 'API key.', 'location': 'query'},
    },
    'schemas': {
        'Widget': {
            'id': 'Widget',
            'type': 'object',
            'properties': {
                'name': {'type': 'string', 'description': 'Widget name.'},
                'count': {'type': 'integer', 'required': True},
            },
        },
        'Empty': {'id': 'Empty', 'type': 'object'},
    },
    'resources': {
        'widgets': {
            'methods': {
                'get': {
                    'id': 'tiny.widgets.get',
                    'httpMethod': 'GET',
                    'description': 'Gets a widget.',
                    'parameters': {
                        'widgetId': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'response': {'$ref': 'Widget'},
                },
            },
        },
    },
}

TINY_DECLARATIONS = """// Type definitions for non-npm package Google Tiny API v1 1.0
// Project: https://tiny.example.com
// Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped
// TypeScript Version: 3.7

// IMPORTANT
// These definitions are for the Google API Javascript Client: https://github.com/google/google-api-javascript-client
// This file was generated by discotyper. Please do not edit it manually.
// Generated from: https://tiny.example.com/rest

/// <reference types="gapi.client" />

declare namespace gapi.client {
    /** Load Tiny API v1 */
    function load(name: "tiny", version: "v1"): PromiseLike<void>;
    function load(name: "tiny", version: "v1", callback: () => any): void;

    namespace tiny {
        interface Widget {
            count: number;
            /** Widget name. */
            name?: string;
        }
        interface WidgetsResource {
            /** Gets a widget. */
            get(request: {
                /** API key. */
                key?: string;
                widgetId: string;
            }): Request<Widget>;
        }

        const widgets: WidgetsResource;
    }
}
"""

TINY_STUB = """/* This is stub file for gapi.client.tiny definition tests */
/* IMPORTANT.
* This file was automatically generated by discotyper. Please do not edit it manually.
**/
gapi.load('client', () => {
    /** now we can use gapi.client */
    gapi.client.load('tiny', 'v1', () => {
        /** now we can use gapi.client.tiny */

        run();
    });

    async function run() {
        /** Gets a widget. */
        await gapi.client.tiny.widgets.get({
            widgetId: "Test string",
        });
    }
});
"""

# A larger API: nested resources, request bodies, recursion, OAuth2 scopes
LIBRARY_API = {
    'kind': 'discovery#restDescription',
    'id': 'library:v2beta1',
    'name': 'Library',
    'version': 'V2beta1',
    'title': 'Library API',
    'description': 'Manages shelves and books.',
    'ownerName': 'Google',
    'documentationLink': 'https://library.example.com',
    'parameters': {
        '$.xgafv': {'type': 'string', 'description': 'V1 error format.'},
        'fields': {'type': 'string', 'description': 'Selector.'},
        'prettyPrint': {'type': 'boolean', 'default': 'true'},
    },
    'auth': {
        'oauth2': {
            'scopes': {
                'https://www.googleapis.com/auth/library.readonly': {
                    'description': 'View your books',
                },
                'https://www.googleapis.com/auth/library': {
                    'description': 'Manage your books',
                },
            },
        },
    },
    'schemas': {
        'Shelf': {
            'id': 'Shelf',
            'type': 'object',
            'properties': {
                'theme': {'type': 'string'},
                'books': {'type': 'array', 'items': {'$ref': 'Book'}},
                'labels': {
                    'type': 'object',
                    'additionalProperties': {'type': 'string'},
                },
            },
        },
        'Book': {
            'id': 'Book',
            'type': 'object',
            'properties': {
                'title': {'type': 'string', 'description': 'Title * of the book.'},
                'sequel': {'$ref': 'Book'},
                'pages': {'type': 'integer', 'format': 'int32'},
            },
        },
        'Empty': {'id': 'Empty', 'type': 'object'},
        'Request': {
            'id': 'Request',
            'type': 'object',
            'properties': {'kind': {'type': 'string'}},
        },
    },
    'resources': {
        'shelves': {
            'methods': {
                'delete': {
                    'id': 'library.shelves.delete',
                    'parameters': {'name': {'type': 'string', 'required': True}},
                    'response': {'$ref': 'Empty'},
                },
                'create': {
                    'id': 'library.shelves.create',
                    'description': 'Creates a shelf.',
                    'request': {'$ref': 'Shelf'},
                    'response': {'$ref': 'Shelf'},
                },
            },
            'resources': {
                'books': {
                    'methods': {
                        'list': {
                            'id': 'library.shelves.books.list',
                            'parameters': {
                                'parent': {'type': 'string', 'required': True},
                                'fields': {'type': 'string', 'required': True},
                            },
                        },
                    },
                },
            },
        },
        'debugger': {
            'methods': {
                'ping': {'id': 'library.debugger.ping'},
            },
        },
    },
}

DIRECTORY = {
    'kind': 'discovery#directoryList',
    'discoveryVersion': 'v1',
    'items': [
        {
            'id': 'tiny:v1',
            'name': 'tiny',
            'version': 'v1',
            'discoveryRestUrl': 'https://example.com/tiny/v1/rest',
            'preferred': True,
        },
        {
            'id': 'tiny:v2alpha',
            'name': 'tiny',
            'version': 'v2alpha',
            'discoveryRestUrl': 'https://example.com/tiny/v2alpha/rest',
            'preferred': False,
        },
        {
            'id': 'library:v2beta1',
            'name': 'library',
            'version': 'v2beta1',
            'discoveryRestUrl': 'https://example.com/library/v2beta1/rest',
            'preferred': False,
        },
        {
            'id': 'replicapool:v1beta1',
            'name': 'replicapool',
            'version': 'v1beta1',
            'discoveryRestUrl': 'https://example.com/replicapool/v1beta1/rest',
            'preferred': True,
        },
    ],
}


def make_api(document: dict) -> RestDescription:
    """Validate a Discovery document dict."""
    return RestDescription.model_validate(document)


def make_writer() -> tuple[StringEmitter, TypescriptWriter]:
    """Create a writer backed by an in-memory emitter."""
    emitter = StringEmitter()
    return emitter, TypescriptWriter.for_emitter(emitter)
